AON_HOST = "aonprd.com"

# Stat block containers, most specific first. The legacy site and the
# current one wrap the detail output differently.
CONTAINER_IDS = [
	"ctl00_RadDrawer1_Content_MainContent_DetailedOutput",
	"ctl00_MainContent_DetailedOutput",
	"main",
]

DOCUMENT_HEADING_SELECTOR = "h1"
SCOPE_HEADING_SELECTOR = "h1, h2, h3, .title, .page-title, strong, b"
TRAIT_CONTAINER_CLASS = "traits"

UNKNOWN_NAME = "Unknown"

# Attacks past the first blocks belong to sidebars, variants and
# related creatures.
ATTACK_BLOCK_LIMIT = 40

# r.jina.ai renders the target page as readable text and allows
# cross-origin reads.
MIRROR_URL = "https://r.jina.ai/http/"
DEFAULT_TIMEOUT = 30.0
REQUEST_HEADERS = {
	"User-Agent": "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
	"Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,text/plain;q=0.8,*/*;q=0.7",
	"Accept-Language": "en-US,en;q=0.5",
}
