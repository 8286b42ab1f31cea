import re
import warnings
from bs4 import NavigableString, Tag, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

BLOCK_TAGS = set([
	'address', 'article', 'aside', 'blockquote', 'dd', 'div', 'dl', 'dt',
	'fieldset', 'figcaption', 'figure', 'footer', 'form', 'h1', 'h2', 'h3',
	'h4', 'h5', 'h6', 'header', 'hr', 'li', 'main', 'nav', 'ol', 'p', 'pre',
	'section', 'table', 'tbody', 'td', 'th', 'thead', 'tr', 'ul'])

SKIP_TAGS = set(['script', 'style', 'noscript', 'template'])

MINUS_SIGNS = ["−", "–"]

def clean(text):
	return re.sub(r"\s+", " ", text or "").strip()

def clean_spaces(text):
	return re.sub(r"[ \t]+", " ", (text or "").replace("\r", "")).strip()

def split_traits(text):
	return [t for t in [clean(part) for part in re.split(r"[,•;]+", text or "")] if t]

def dedup(items):
	seen = set()
	retitems = []
	for item in items:
		if item not in seen:
			seen.add(item)
			retitems.append(item)
	return retitems

def unlink_markdown(text):
	# "[jaws](https://2e.aonprd.com/Weapons.aspx?ID=1)" -> "jaws"
	return re.sub(r"\[([^\]\n]*)\]\([^)\n]*\)", r"\1", text or "")

def normalize_minus(text):
	text = text or ""
	for sign in MINUS_SIGNS:
		text = text.replace(sign, "-")
	return text

def parse_number(text):
	text = normalize_minus(text.strip())
	negative = False
	if text.startswith('-'):
		negative = True
		text = text[1:]
	elif text.startswith('+'):
		text = text[1:]
	if text == '—' or text == '':
		return None
	value = int(text)
	if negative:
		value = value * -1
	return value

def filter_entities(text):
	# Mojibake from pages decoded with the wrong charset. Line breaks are kept,
	# the text path splits on them.
	text = text.replace("Âº", "º")
	text = text.replace("Ã\u0097", "×")
	text = text.replace("â\u0080\u0091", "‑")
	text = text.replace("â\u0080\u0093", "–")
	text = text.replace("â\u0080\u0094", "—")
	text = text.replace("â\u0080\u0098", "‘")
	text = text.replace("â\u0080\u0099", "’")
	text = text.replace("â\u0080\u009c", "“")
	text = text.replace("â\u0080\u009d", "”")
	text = text.replace("â\u0080¢", "•")
	text = text.replace("â\u0080¦", "…")
	text = text.replace("â\u0088\u0092", "−")
	text = text.replace("Ê¼", "’") # was u02BC
	text = text.replace("Â ", " ")
	text = text.replace(" ", " ")
	return text

def is_tag_named(element, taglist):
	if type(element) != Tag:
		return False
	elif element.name in taglist:
		return True
	return False

def is_trait(tag):
	if type(tag) != Tag or not tag.has_attr('class'):
		return False
	for c in tag['class']:
		if c.startswith('trait') and c != 'traits':
			return True
	return False

def get_text(detail):
	return ''.join(detail.find_all(string=True))

def block_text(element):
	"""Render an element's text with a line break for every <br> and block tag.

	Runs of spaces collapse inside a line; a blank line separates blocks.
	"""
	parts = []
	def _walk(node):
		for child in node.children:
			if type(child) == NavigableString:
				parts.append(str(child).replace("\r", " ").replace("\n", " "))
			elif type(child) != Tag or child.name in SKIP_TAGS:
				continue
			elif child.name == 'br':
				parts.append("\n")
			elif child.name in BLOCK_TAGS:
				parts.append("\n")
				_walk(child)
				parts.append("\n")
			else:
				_walk(child)
	if type(element) == NavigableString:
		return clean_spaces(str(element))
	_walk(element)
	text = "\n".join([clean_spaces(line) for line in ''.join(parts).split("\n")])
	return re.sub(r"\n{3,}", "\n\n", text).strip("\n")
