from dataclasses import dataclass
from universal.utils import clean, dedup, normalize_minus
from aonprd.constants import UNKNOWN_NAME
from aonprd.schema import validate_against_schema
from aonprd.attacks import coalesce_attacks


@dataclass(frozen=True)
class AttackEntry:
	name: str
	attack: str
	damage: str = None

	def to_dict(self):
		return {'name': self.name, 'attack': self.attack, 'damage': self.damage}


@dataclass(frozen=True)
class StatRecord:
	name: str
	level: int = None
	traits: tuple = ()
	ac: int = None
	hp: int = None
	speed: str = None
	attacks: tuple = ()

	def to_dict(self):
		return {
			'name': self.name,
			'level': self.level,
			'traits': list(self.traits),
			'ac': self.ac,
			'hp': self.hp,
			'speed': self.speed,
			'attacks': [a.to_dict() for a in self.attacks],
		}


def _integer(value):
	if isinstance(value, int) and not isinstance(value, bool):
		return value
	return None


def _sequence(value):
	if isinstance(value, (list, tuple)):
		return value
	return []


def normalize_attack(attack):
	return {
		'name': clean(attack.get('name')),
		'attack': normalize_minus(clean(attack.get('attack'))),
		'damage': clean(attack.get('damage')) or None,
	}


def normalize(struct):
	record = {
		'name': clean(struct.get('name')) or UNKNOWN_NAME,
		'level': _integer(struct.get('level')),
		'traits': dedup([t for t in _sequence(struct.get('traits')) if t]),
		'ac': _integer(struct.get('ac')),
		'hp': _integer(struct.get('hp')),
		'speed': struct.get('speed') or None,
		'attacks': coalesce_attacks([normalize_attack(a)
			for a in _sequence(struct.get('attacks')) if clean(a.get('name'))]),
	}
	validate_against_schema(record, "stat_record.schema.json")
	return StatRecord(
		name=record['name'],
		level=record['level'],
		traits=tuple(record['traits']),
		ac=record['ac'],
		hp=record['hp'],
		speed=record['speed'],
		attacks=tuple(AttackEntry(**a) for a in record['attacks']))
