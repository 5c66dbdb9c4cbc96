"""
Loading of service metadata documents from HTTP(S) URLs, file URLs and local paths.
"""

import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple
from urllib.parse import unquote, urlparse
import requests
from lxml import etree

from .constants import USER_AGENT
from .errors import MetadataLoadError


class MetadataSource:
    """Fetches a metadata document and parses it into an lxml element tree."""

    def __init__(self, auth: Optional[Tuple[str, str]] = None, timeout: Optional[float] = None,
                 verbose: bool = False):
        self.timeout = timeout
        self.verbose = verbose
        self.session = requests.Session()
        if auth:
            self.session.auth = auth
        self.session.headers.update({
            'Accept': 'application/xml',
            'User-Agent': USER_AGENT
        })

    def _log_verbose(self, message: str):
        """Prints message to stderr only if verbose mode is enabled."""
        if self.verbose:
            timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
            print(f"[{timestamp} Source VERBOSE] {message}", file=sys.stderr)

    def close(self):
        """Release the pooled HTTP connections of the session."""
        self.session.close()

    @staticmethod
    def _parser() -> etree.XMLParser:
        # Metadata comes from remote services; never expand entities or follow DTDs.
        return etree.XMLParser(resolve_entities=False, no_network=True, load_dtd=False)

    def load(self, uri: str) -> etree._Element:
        """
        Load the document addressed by uri and return its root element.

        Raises:
            MetadataLoadError: if the resource cannot be read or is not well-formed XML
        """
        content = self.fetch(uri)
        try:
            root = etree.fromstring(content, parser=self._parser())
        except etree.XMLSyntaxError as parse_err:
            raise MetadataLoadError(f"Metadata is not well-formed XML: {parse_err}", context=uri) from parse_err
        self._log_verbose(f"Parsed metadata document with root <{etree.QName(root).localname}>.")
        return root

    def fetch(self, uri: str) -> bytes:
        """Return the raw bytes addressed by uri."""
        scheme = urlparse(uri).scheme.lower()
        if scheme in ('http', 'https'):
            return self._fetch_http(uri)
        if scheme == 'file':
            return self._read_file(Path(unquote(urlparse(uri).path)), uri)
        return self._read_file(Path(uri), uri)

    def _fetch_http(self, uri: str) -> bytes:
        self._log_verbose(f"Fetching metadata from {uri}...")
        try:
            response = self.session.get(uri, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as req_err:
            message = f"Could not fetch metadata: {req_err}"
            if req_err.response is not None and req_err.response.status_code in [401, 403]:
                message += " (authentication might be required or incorrect)"
            raise MetadataLoadError(message, context=uri) from req_err
        self._log_verbose("Metadata fetched successfully.")
        return response.content

    def _read_file(self, path: Path, uri: str) -> bytes:
        self._log_verbose(f"Reading metadata from {path}...")
        try:
            return path.read_bytes()
        except OSError as io_err:
            raise MetadataLoadError(f"Could not read metadata file: {io_err}", context=uri) from io_err
