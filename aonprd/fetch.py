"""Page retrieval for aonprd.com.

A direct request is tried first. When it is refused or fails, the page is
requested once more through a mirror that renders it as readable text.
"""
import logging
from collections import namedtuple
from urllib.parse import urlsplit, quote

import httpx

from aonprd.constants import MIRROR_URL, DEFAULT_TIMEOUT, REQUEST_HEADERS
from aonprd.errors import RetrievalFailure

logger = logging.getLogger(__name__)

Content = namedtuple('Content', ['kind', 'body'])


def mirror_url(url, mirror=MIRROR_URL):
	# The mirror wants a plain http:// target.
	parts = urlsplit(url)
	target = "http://" + parts.netloc + parts.path
	if parts.query:
		target = target + "?" + parts.query
	return mirror + quote(target, safe="")


def content_kind(response):
	if "text/html" in response.headers.get("content-type", ""):
		return "html"
	return "text"


async def fetch_aon(url, client=None, mirror=MIRROR_URL, timeout=DEFAULT_TIMEOUT):
	if client is None:
		async with httpx.AsyncClient(timeout=timeout) as client:
			return await _fetch_with_fallback(client, url, mirror)
	return await _fetch_with_fallback(client, url, mirror)


async def _fetch_with_fallback(client, url, mirror):
	logger.debug("Fetching %s", url)
	try:
		response = await client.get(url, headers=REQUEST_HEADERS, follow_redirects=True)
	except httpx.HTTPError as e:
		logger.warning("Direct fetch of %s failed: %s", url, e)
	else:
		if response.is_success:
			return Content(content_kind(response), response.text)
		logger.warning("Direct fetch of %s returned %s", url, response.status_code)

	mirrored = mirror_url(url, mirror)
	logger.info("Fetching %s through mirror %s", url, mirrored)
	try:
		response = await client.get(mirrored, headers=REQUEST_HEADERS, follow_redirects=True)
		response.raise_for_status()
	except httpx.HTTPError as e:
		raise RetrievalFailure("Fetch failed via mirror: %s" % url) from e
	return Content("text", response.text)
