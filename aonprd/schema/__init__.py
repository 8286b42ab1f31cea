import os
import json
import jsonschema

SCHEMA_DIR = os.path.dirname(os.path.abspath(__file__))

_schemas = {}


def get_schema(schema_name):
	if schema_name not in _schemas:
		with open(os.path.join(SCHEMA_DIR, schema_name)) as fp:
			_schemas[schema_name] = json.load(fp)
	return _schemas[schema_name]


def validate_against_schema(data, schema_name):
	# Records are validated in their dict form, before being frozen.
	schema = get_schema(schema_name)
	validator = jsonschema.Draft7Validator(schema)
	validator.validate(data)
	return data
