import re
from universal.utils import clean, normalize_minus, parse_number, unlink_markdown

# "Melee [one-action] claw +18 [+14/+10] (2d8+9 piercing)"
#   -> ("Melee", "claw", "+18", "2d8+9 piercing") once ACTION_TOKEN is removed
# Text between the bonus and the parenthesis (multiple attack penalties,
# "Damage") may be anything but a line break.
DETAILED_ATTACK = re.compile(
	r"(Melee|Ranged)\s+([^\n\r;•—-]+?)\s+([+−–-][0-9]+)(?:[^(\n\r]*)\(([^)]+)\)",
	re.IGNORECASE)

# "Ranged shortbow +9" -> ("Ranged", "shortbow", "+9")
# Only used when no line anywhere matches DETAILED_ATTACK.
RELAXED_ATTACK = re.compile(
	r"(Melee|Ranged)\s+([^\n\r;•—-]+?)\s+([+−–-][0-9]+)",
	re.IGNORECASE)

# Action glyphs and bracketed notes: "[one-action]", "◆", "[+14/+10]".
# Removed before matching, names cannot contain a hyphen.
ACTION_TOKEN = re.compile(r"\[[^\]\n]*\]|[◆◇⬲⬺⬻⬽]")
# Markdown bold from the text mirror: "**Melee** jaws +14"
MARKDOWN_BOLD = re.compile(r"\*\*|__")


def scan_attacks(blocks, pattern, with_damage):
	attacks = []
	for block in blocks:
		# Links first, ACTION_TOKEN would otherwise eat "[jaws]" of "[jaws](url)"
		text = ACTION_TOKEN.sub(" ", MARKDOWN_BOLD.sub("", unlink_markdown(block)))
		for m in pattern.finditer(text):
			name = clean(m.group(2))
			if not name:
				continue
			attacks.append({
				'name': name,
				'attack': normalize_minus(m.group(3)),
				'damage': clean(m.group(4)) if with_damage else None,
			})
	return attacks


def extract_attacks(blocks):
	attacks = scan_attacks(blocks, DETAILED_ATTACK, True)
	if not attacks:
		attacks = scan_attacks(blocks, RELAXED_ATTACK, False)
	return coalesce_attacks(attacks)


def coalesce_attacks(attacks):
	# One entry per name, keeping the higher bonus. Ties keep the first seen
	# and the dict keeps first-seen order.
	kept = {}
	for attack in attacks:
		key = attack['name'].lower()
		if key not in kept:
			kept[key] = attack
		elif _bonus(attack) > _bonus(kept[key]):
			kept[key] = attack
	return list(kept.values())


def _bonus(attack):
	value = parse_number(attack.get('attack') or "0")
	if value is None:
		return 0
	return value
