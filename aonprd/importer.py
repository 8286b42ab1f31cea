import logging
import re
from urllib.parse import urlsplit

import jsonschema

from aonprd.constants import AON_HOST
from aonprd.creature import parse_html, parse_text
from aonprd.errors import InvalidInput, ParseFailure
from aonprd.fetch import fetch_aon
from aonprd.record import normalize

logger = logging.getLogger(__name__)


def check_url(url):
	if not isinstance(url, str):
		raise InvalidInput("Invalid URL: %r" % (url,))
	try:
		parts = urlsplit(url.strip())
		host = parts.hostname
	except ValueError as e:
		raise InvalidInput("Invalid URL: %s" % url) from e
	if parts.scheme not in ['http', 'https'] or not host:
		raise InvalidInput("Invalid URL: %s" % url)
	if not re.search(r"(^|\.)%s$" % re.escape(AON_HOST), host, re.IGNORECASE):
		logger.warning("Non-AoN host %s, parser may fail", host)
	return parts


async def import_from_link(url, client=None):
	check_url(url)
	content = await fetch_aon(url.strip(), client=client)
	return parse_content(content.kind, content.body)


def parse_content(kind, body):
	assert kind in ['html', 'text'], kind
	logger.debug("Parsing %s content, %d chars", kind, len(body))
	if kind == 'html':
		struct = parse_html(body)
	else:
		struct = parse_text(body)
	if not struct['name'] and struct['level'] is None and struct['hp'] is None:
		raise ParseFailure("No creature found in page")
	try:
		return normalize(struct)
	except jsonschema.ValidationError as e:
		raise ParseFailure("Unusable stat block: %s" % e.message) from e


def import_from_file(filename):
	with open(filename, encoding="utf-8", errors="replace") as fp:
		data = fp.read()
	if filename.lower().endswith((".htm", ".html")) or data.lstrip().startswith("<"):
		return parse_content('html', data)
	return parse_content('text', data)
