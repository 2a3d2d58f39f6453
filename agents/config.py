"""
Configuration settings for the agents package.
"""

import os

#==============================================================================
# PAGE FETCHING
#==============================================================================

# Only the first few linked stylesheets are fetched
MAX_STYLESHEETS = 5

# Seconds; the page fetch blocks the whole analysis, stylesheets are best-effort
PAGE_FETCH_TIMEOUT = float(os.getenv('PAGE_FETCH_TIMEOUT', '30'))
STYLESHEET_FETCH_TIMEOUT = float(os.getenv('STYLESHEET_FETCH_TIMEOUT', '10'))

# Some origins gate on these headers, so requests look like a desktop browser
BROWSER_USER_AGENT = (
    'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 '
    '(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
)
BROWSER_ACCEPT = 'text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8'
BROWSER_ACCEPT_LANGUAGE = 'en-US,en;q=0.5'

#==============================================================================
# EXTRACTION LIMITS
#==============================================================================

COLOR_CANDIDATE_LIMIT = 20
COLOR_DEDUP_THRESHOLD = 30
COLOR_OUTPUT_LIMIT = 8

# Perceived brightness (0-255) outside this band is treated as page chrome
NEAR_WHITE_BRIGHTNESS = 245
NEAR_BLACK_BRIGHTNESS = 10

FONT_OUTPUT_LIMIT = 5
LOGO_OUTPUT_LIMIT = 5

#==============================================================================
# BRAND GUIDELINES GENERATION
#==============================================================================

BRAND_GENERATION_MODEL = os.getenv('BRAND_GENERATION_MODEL', 'claude-sonnet-4-20250514')
GENERATION_MAX_TOKENS = 4096
GENERATION_MAX_RETRIES = 2

# Attempts instructor makes per call, re-asking with the validation errors
GENERATION_VALIDATION_ATTEMPTS = 2

# Backoff is base * 2**attempt seconds
GENERATION_RETRY_BASE_DELAY = float(os.getenv('GENERATION_RETRY_BASE_DELAY', '1.0'))
