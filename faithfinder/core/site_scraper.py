"""Scrape a community's public website for listing details."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Iterable, Optional
from urllib.parse import urlparse, urlunparse

import requests
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

USER_AGENT = "FaithFinderBot/1.0 (+https://faithfinder.app/contact)"
REQUEST_TIMEOUT = 10

EMAIL_REGEX = re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.IGNORECASE)
PHONE_REGEX = re.compile(r"\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
ADDRESS_REGEX = re.compile(
    r"\d+\s+[A-Za-z\s]+(?:Street|St|Avenue|Ave|Road|Rd|Boulevard|Blvd|Lane|Ln|Drive|Dr|Court|Ct|Circle|Cir|Way)"
    r"[,\s]+[A-Za-z\s]+,\s+[A-Z]{2}\s+\d{5}"
)

SERVICE_KEYWORDS = ("service", "worship", "mass", "sunday", "saturday")
DENOMINATION_KEYWORDS = (
    "catholic",
    "baptist",
    "methodist",
    "lutheran",
    "presbyterian",
    "pentecostal",
    "episcopal",
    "orthodox",
    "evangelical",
    "non-denominational",
)
PASTOR_KEYWORDS = ("pastor", "reverend", "rev.", "father", "minister", "priest")
EVENT_KEYWORDS = ("event", "calendar", "upcoming", "schedule")

_TEXT_TAGS = ["p", "li", "span", "div", "h1", "h2", "h3", "h4", "td", "strong"]


class ScrapeError(RuntimeError):
    """Raised when a website cannot be fetched or is not HTML."""


def sanitize_website(raw_url: str) -> Optional[str]:
    """Normalise raw website strings into absolute https URLs."""

    if not raw_url:
        return None

    url = raw_url.strip()
    if not url:
        return None

    parsed = urlparse(url, scheme="https")
    if not parsed.netloc:
        parsed = urlparse(f"https://{url}")

    if not parsed.netloc or "." not in parsed.netloc:
        return None

    normalized_path = parsed.path or "/"
    if not normalized_path.startswith("/"):
        normalized_path = f"/{normalized_path}"

    normalized = parsed._replace(path=normalized_path, fragment="")
    return urlunparse(normalized)


def _first_text(soup: BeautifulSoup, keywords: Iterable[str], *, min_len: int, max_len: int, require_colon: bool = False) -> Optional[str]:
    for tag in soup.find_all(_TEXT_TAGS):
        text = tag.get_text(" ", strip=True)
        lowered = text.lower()
        if not any(keyword in lowered for keyword in keywords):
            continue
        if require_colon and ":" not in text:
            continue
        if min_len < len(text) < max_len:
            return text
    return None


def extract_details(soup: BeautifulSoup) -> Dict[str, Optional[str]]:
    body_text = soup.get_text(" ", strip=True)
    lowered = body_text.lower()

    title = soup.title.get_text(strip=True) if soup.title else ""
    heading = soup.find("h1")
    name = title or (heading.get_text(strip=True) if heading else "")

    description = None
    for attrs in ({"name": "description"}, {"property": "og:description"}):
        meta = soup.find("meta", attrs=attrs)
        if meta and meta.get("content"):
            description = meta["content"].strip()
            break
    if not description:
        paragraph = soup.find("p")
        description = paragraph.get_text(" ", strip=True) if paragraph else None

    phone_match = PHONE_REGEX.search(body_text)
    email_match = EMAIL_REGEX.search(body_text)
    address_match = ADDRESS_REGEX.search(body_text)
    denomination = next((kw for kw in DENOMINATION_KEYWORDS if kw in lowered), None)

    return {
        "name": name or None,
        "description": description or None,
        "phone": phone_match.group(0) if phone_match else None,
        "email": email_match.group(0).lower() if email_match else None,
        "address": address_match.group(0) if address_match else None,
        "service_times": _first_text(soup, SERVICE_KEYWORDS, min_len=10, max_len=500, require_colon=True),
        "denomination": denomination.capitalize() if denomination else None,
        "pastor": _first_text(soup, PASTOR_KEYWORDS, min_len=5, max_len=100),
        "events": _first_text(soup, EVENT_KEYWORDS, min_len=20, max_len=1000),
    }


def scrape_website(raw_url: str, session: Optional[requests.Session] = None) -> Dict[str, Any]:
    """Fetch a single page and pull listing fields out of it."""
    url = sanitize_website(raw_url)
    if not url:
        raise ValueError(f"invalid website URL: {raw_url!r}")

    http = session or requests.Session()
    try:
        response = http.get(
            url,
            timeout=REQUEST_TIMEOUT,
            headers={"User-Agent": USER_AGENT},
            allow_redirects=True,
        )
        response.raise_for_status()
    except requests.RequestException as exc:
        logger.warning("Failed to fetch %s: %s", url, exc)
        raise ScrapeError(f"Failed to scrape website: {exc}") from exc
    finally:
        if session is None:
            http.close()

    content_type = response.headers.get("Content-Type", "").lower()
    if "text/html" not in content_type:
        raise ScrapeError(f"Failed to scrape website: unexpected content-type {content_type or 'unknown'}")

    soup = BeautifulSoup(response.text, "html.parser")
    details = extract_details(soup)
    logger.info("Scraped %s (fields found: %d)", url, sum(1 for v in details.values() if v))
    return {"website": response.url or url, **details}
