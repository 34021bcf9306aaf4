"""
Reference resolver for $ref resolution.

Replaces every $ref in a schema by the schema it points to, producing
a self-contained tree. Supports local JSON pointers, relative files and
remote http(s) documents.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any
from urllib.parse import unquote, urldefrag, urljoin, urlparse
from urllib.request import url2pathname

import jsonpointer
import requests

from ...errors import ReferenceResolutionError

logger = logging.getLogger(__name__)


def base_uri_for(path: str | Path | None) -> str:
    """
    Build the base URI relative references are resolved against.

    Args:
        path: A schema file, a directory, or None for the working directory

    Returns:
        A file:// URI (directories end with a slash)
    """
    if path is None:
        return Path.cwd().resolve().as_uri() + "/"
    path = Path(path).resolve()
    if path.is_dir():
        return path.as_uri() + "/"
    return path.as_uri()


class ReferenceResolver:
    """Dereferences $ref pointers in a JSON Schema."""

    def __init__(self, base_uri: str | None = None, timeout: float = 30):
        """
        Initialize the resolver.

        Args:
            base_uri: URI of the document being resolved (default: working directory)
            timeout: Timeout in seconds for remote fetches
        """
        self.base_uri = base_uri or base_uri_for(None)
        self.timeout = timeout
        self._content_cache: dict[str, str] = {}
        self._document_cache: dict[str, Any] = {}

    def dereference(self, schema: Any) -> Any:
        """
        Return a copy of the schema with all $ref pointers replaced.

        Args:
            schema: The parsed root schema

        Returns:
            The dereferenced schema

        Raises:
            ReferenceResolutionError: If a reference cannot be reached, parsed
                or is circular
        """
        return self._resolve(schema, self.base_uri, schema, ())

    def _resolve(self, node: Any, base_uri: str, document: Any, stack: tuple[str, ...]) -> Any:
        if isinstance(node, list):
            return [self._resolve(item, base_uri, document, stack) for item in node]
        if not isinstance(node, dict):
            return node

        ref = node.get("$ref")
        if not isinstance(ref, str):
            return {key: self._resolve(value, base_uri, document, stack) for key, value in node.items()}

        target, target_base, target_document, location = self._lookup(ref, base_uri, document)
        if location in stack:
            raise ReferenceResolutionError(ref, "circular reference")

        resolved = self._resolve(target, target_base, target_document, stack + (location,))

        # Keywords next to a $ref refine the referenced schema
        siblings = {key: self._resolve(value, base_uri, document, stack) for key, value in node.items() if key != "$ref"}
        if siblings and isinstance(resolved, dict):
            return {**resolved, **siblings}
        return resolved

    def _lookup(self, ref: str, base_uri: str, document: Any) -> tuple[Any, str, Any, str]:
        """
        Find the target of a $ref.

        Returns:
            (target schema, base URI of the target, document containing it, absolute location)
        """
        url, fragment = urldefrag(ref)
        if url:
            target_base = urljoin(base_uri, url)
            target_document = self._load_document(target_base)
        else:
            target_base = base_uri
            target_document = document

        pointer = unquote(fragment)
        if pointer:
            try:
                target = jsonpointer.resolve_pointer(target_document, pointer)
            except jsonpointer.JsonPointerException as e:
                raise ReferenceResolutionError(ref, str(e)) from e
        else:
            target = target_document

        return target, target_base, target_document, f"{target_base}#{pointer}"

    def _load_document(self, uri: str) -> Any:
        """Load and parse the JSON document at the given URI."""
        if uri not in self._document_cache:
            content = self.fetch_content(uri)
            try:
                self._document_cache[uri] = json.loads(content)
            except json.JSONDecodeError as e:
                raise ReferenceResolutionError(uri, f"invalid JSON: {e}") from e
        return self._document_cache[uri]

    def fetch_content(self, uri: str) -> str:
        """
        Fetch the content from the specified URI.

        Args:
            uri: A file:// or http(s):// URI

        Returns:
            The fetched text

        Raises:
            ReferenceResolutionError: If the content cannot be fetched
        """
        if uri in self._content_cache:
            return self._content_cache[uri]

        parsed_url = urlparse(uri)
        scheme = parsed_url.scheme

        if scheme in ("http", "https"):
            logger.debug("Fetching remote schema %s", uri)
            try:
                response = requests.get(uri, timeout=self.timeout)
                # Raises an HTTPError if the response status code is 4XX/5XX
                response.raise_for_status()
            except requests.RequestException as e:
                raise ReferenceResolutionError(uri, str(e)) from e
            text = response.text

        elif scheme == "file":
            file_path = url2pathname(parsed_url.path)
            logger.debug("Reading schema file %s", file_path)
            try:
                with open(file_path, encoding="utf-8") as f:
                    text = f.read()
            except OSError as e:
                raise ReferenceResolutionError(uri, str(e)) from e

        else:
            raise ReferenceResolutionError(uri, f"unsupported URL scheme: {scheme or '(none)'}")

        self._content_cache[uri] = text
        return text
