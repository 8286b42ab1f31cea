import re
from bs4 import BeautifulSoup
from universal.utils import clean, dedup, split_traits, parse_number
from universal.utils import filter_entities, is_trait, is_tag_named, get_text
from aonprd.constants import DOCUMENT_HEADING_SELECTOR, SCOPE_HEADING_SELECTOR
from aonprd.constants import TRAIT_CONTAINER_CLASS, ATTACK_BLOCK_LIMIT
from aonprd.scope import pick_scope, StructuredScope, FlatText
from aonprd.attacks import extract_attacks

# "Barghest Creature 4", "Kobold Scout (Creature -1)"
CREATURE_MARKER = re.compile(r"\bCreature\s+([-−–]?[0-9]+)\b", re.IGNORECASE)
# "Barghest (Creature 4)" -> "Barghest"
NAME_BEFORE_PAREN_MARKER = re.compile(
	r"^(.+?)\s*\([^)]*?Creature\s+[-−–]?[0-9]+\)", re.IGNORECASE)
# "Barghest Creature 4" -> "Barghest"
NAME_BEFORE_MARKER = re.compile(
	r"^(.+?)\s+Creature\s+[-−–]?[0-9]+", re.IGNORECASE)
# A marker with a name in front of it on the same line
NAMED_MARKER = re.compile(r"\S\s*\(?\s*Creature\s+[-−–]?[0-9]+", re.IGNORECASE)
# Trailing "Creature 4" or "(Creature 4)" on a heading
CREATURE_SUFFIX = re.compile(
	r"\s*\(?\s*Creature\s+[-−–]?[0-9]+\s*\)?\s*$", re.IGNORECASE)
# Markdown headings and emphasis left by the text mirror
MARKDOWN_EDGES = re.compile(r"^[#*_>\s]+|[*_\s]+$")

# "Traits: Fiend, Evil, Large", "**Traits:** Evil"
TRAITS_LABEL = re.compile(r"^[\s*_]*Traits\b")
TRAITS_LINE = re.compile(r"^[\s*_]*Traits[*_]*\s*[:：][\s*_]*(.+)$")
# "Kobold (Small, Humanoid, Kobold)"
PARENTHESIZED = re.compile(r"\(([^)]+)\)")

# "AC 23; Fort +14", "**AC** 23"
AC_LABEL = re.compile(r"\bAC\b")
AC_VALUE = re.compile(r"\bAC\b[\s*_:]*([0-9]+)")
# "HP 150, regeneration 10"
HP_LABEL = re.compile(r"\bHP\b")
HP_VALUE = re.compile(r"\bHP\b[\s*_:]*([0-9]+)")
# "Speed 25 feet, fly 40 feet" -> "25 feet, fly 40 feet"
SPEED_LABEL = re.compile(r"\bSpeed\b")
SPEED_VALUE = re.compile(r"\bSpeed\b[\s*_:]*([^.\n\r]+)")


def first_success(strategies, source):
	for strategy in strategies:
		value = strategy(source)
		if _present(value):
			return value
	return None


def _present(value):
	if value is None:
		return False
	if isinstance(value, (str, list, tuple)) and len(value) == 0:
		return False
	return True


def _heading_name(tag):
	if tag is None:
		return None
	name = CREATURE_SUFFIX.sub("", clean(tag.get_text(" ")))
	return name or None


def name_from_document_heading(scope):
	return _heading_name(scope.select_one(DOCUMENT_HEADING_SELECTOR, document=True))


def name_from_scope_heading(scope):
	return _heading_name(scope.select_one(SCOPE_HEADING_SELECTOR))


def name_from_creature_line(scope):
	line = scope.find_line(CREATURE_MARKER, NAMED_MARKER)
	if not line:
		return None
	m = NAME_BEFORE_PAREN_MARKER.search(line) or NAME_BEFORE_MARKER.search(line)
	if m:
		return MARKDOWN_EDGES.sub("", clean(m.group(1))) or None


def level_from_creature_marker(scope):
	line = scope.find_line(CREATURE_MARKER)
	if not line:
		return None
	m = CREATURE_MARKER.search(line)
	if m:
		return parse_number(m.group(1))


def traits_from_markup(scope):
	def _is_trait_tag(tag):
		if not is_tag_named(tag, ['a', 'span']):
			return False
		if is_trait(tag):
			return True
		return tag.find_parent(class_=TRAIT_CONTAINER_CLASS) is not None

	traits = [clean(get_text(tag)) for tag in scope.find_all(_is_trait_tag)]
	return dedup([t for t in traits if t])


def traits_from_traits_line(scope):
	line = scope.find_line(TRAITS_LABEL, TRAITS_LINE)
	if not line:
		return []
	m = TRAITS_LINE.search(line)
	return dedup(split_traits(m.group(1)))


def traits_from_first_paragraph(scope):
	text = scope.first_paragraph()
	if not text:
		return []
	m = PARENTHESIZED.search(text)
	if m:
		return dedup(split_traits(m.group(1)))
	return []


def labeled_number(label, pattern):
	def _extract(scope):
		line = scope.find_line(label, pattern)
		if line:
			return int(pattern.search(line).group(1))
	return _extract


def speed_from_label(scope):
	line = scope.find_line(SPEED_LABEL, SPEED_VALUE)
	if not line:
		return None
	speed = MARKDOWN_EDGES.sub("", clean(SPEED_VALUE.search(line).group(1)))
	return speed or None


armor_class_from_label = labeled_number(AC_LABEL, AC_VALUE)
hit_points_from_label = labeled_number(HP_LABEL, HP_VALUE)

HTML_STRATEGIES = {
	'name': (name_from_document_heading, name_from_scope_heading,
		name_from_creature_line),
	'level': (level_from_creature_marker,),
	'traits': (traits_from_markup, traits_from_traits_line,
		traits_from_first_paragraph),
	'ac': (armor_class_from_label,),
	'hp': (hit_points_from_label,),
	'speed': (speed_from_label,),
}

TEXT_STRATEGIES = {
	'name': (name_from_creature_line,),
	'level': (level_from_creature_marker,),
	'traits': (traits_from_traits_line,),
	'ac': (armor_class_from_label,),
	'hp': (hit_points_from_label,),
	'speed': (speed_from_label,),
}


def extract_fields(scope, strategies):
	struct = {}
	for field, fxns in strategies.items():
		struct[field] = first_success(fxns, scope)
	if struct['traits'] is None:
		struct['traits'] = []
	return struct


def parse_html(html):
	soup = BeautifulSoup(filter_entities(html), "lxml")
	scope = StructuredScope(pick_scope(soup), soup)
	struct = extract_fields(scope, HTML_STRATEGIES)
	struct['attacks'] = extract_attacks(scope.blocks()[:ATTACK_BLOCK_LIMIT])
	return struct


def parse_text(text):
	scope = FlatText(filter_entities(text))
	struct = extract_fields(scope, TEXT_STRATEGIES)
	struct['attacks'] = extract_attacks(scope.blocks())
	return struct
