import re
from bs4 import NavigableString
from universal.utils import block_text, clean_spaces, unlink_markdown, SKIP_TAGS
from aonprd.constants import CONTAINER_IDS


def pick_scope(soup):
	for cssid in CONTAINER_IDS:
		content = soup.find(id=cssid)
		if content is not None:
			return content
	if soup.body:
		return soup.body
	return soup


def find_text_node(root, regex):
	for node in root.descendants:
		if type(node) != NavigableString:
			continue
		if node.parent is not None and node.parent.name in SKIP_TAGS:
			continue
		if regex.search(str(node)):
			return node
	return None


def _first_line(lines, label, pattern):
	# The first line carrying the label decides; a later one is never used.
	for line in lines:
		if label.search(line):
			if pattern.search(line):
				return line
			return None
	return None


class StructuredScope():
	"""A parsed page narrowed to its stat block.

	`search` finds the first text node under an element matching a regex;
	it defaults to a depth first walk of the soup.
	"""
	def __init__(self, element, document=None, search=find_text_node):
		self.element = element
		self.document = document if document is not None else element
		self.search = search

	def select_one(self, selector, document=False):
		root = self.document if document else self.element
		return root.select_one(selector)

	def find_all(self, fxn):
		return self.element.find_all(fxn)

	def first_paragraph(self):
		p = self.element.find("p")
		if p:
			return block_text(p)

	def find_line(self, label, pattern=None):
		# Labels often sit alone in their own tag (<b>AC</b> 23), so widen to
		# enclosing elements until the label's line carries the value.
		pattern = pattern or label
		node = self.search(self.element, label)
		if node is None:
			return None
		element = node.parent
		while element is not None:
			line = _first_line(block_text(element).split("\n"), label, pattern)
			if line is not None:
				return line
			if element is self.element:
				break
			element = element.parent
		return None

	def blocks(self):
		return [b for b in re.split(r"\n{2,}", block_text(self.element)) if b.strip()]

	def __repr__(self):
		return "<StructuredScope %s>" % self.element.name


class FlatText():
	"""Plain text, such as the mirror's markdown rendering of a page.

	Markdown links are reduced to their text.
	"""
	def __init__(self, text):
		text = (text or "").replace("\r\n", "\n").replace("\r", "\n")
		self.text = unlink_markdown(text)

	def lines(self):
		return [clean_spaces(line) for line in self.text.split("\n")]

	def find_line(self, label, pattern=None):
		return _first_line(self.lines(), label, pattern or label)

	def blocks(self):
		return [self.text]

	def __repr__(self):
		return "<FlatText %d chars>" % len(self.text)
