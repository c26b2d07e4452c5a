"""
Verb dictionary sources and the memoized dictionary loader.
"""
import asyncio
import json
import logging
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Optional

import httpx

from .cache import AsyncOnce
from .exceptions import DictionaryFetchError, DictionaryFormatError, VerbLookupError
from .models import VerbDictionary

logger = logging.getLogger(__name__)


class DictionarySource(ABC):
    """Where the raw verb dictionary JSON comes from."""

    @abstractmethod
    async def fetch(self) -> Any:
        """
        Retrieve the decoded JSON payload.

        :return: Decoded JSON value
        :raises: DictionaryFetchError if the resource cannot be read
        """
        pass

    @abstractmethod
    def describe(self) -> str:
        """Human-readable location, used in logs and errors."""
        pass


class HttpDictionarySource(DictionarySource):
    """
    Fetches the dictionary with a single HTTP GET.

    :param url: Absolute URL of the JSON resource
    :param timeout: Seconds before giving up. None waits forever.
    :param transport: Optional httpx transport (tests use httpx.MockTransport)
    """

    def __init__(
        self,
        url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.timeout = timeout
        self._transport = transport

    async def fetch(self) -> Any:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                r = await client.get(self.url)
                r.raise_for_status()
                return r.json()
        except httpx.HTTPError as exc:
            raise DictionaryFetchError(
                f"Failed to fetch verb dictionary from {self.url}: {exc}"
            ) from exc
        except ValueError as exc:
            # JSONDecodeError or UnicodeDecodeError
            raise DictionaryFormatError(
                f"Verb dictionary at {self.url} is not valid UTF-8 JSON: {exc}"
            ) from exc

    def describe(self) -> str:
        return self.url


class FileDictionarySource(DictionarySource):
    """Reads the dictionary from a local JSON file."""

    def __init__(self, path: str):
        self.path = path

    async def fetch(self) -> Any:
        try:
            return await asyncio.to_thread(self._read)
        except ValueError as exc:
            raise DictionaryFormatError(
                f"Verb dictionary at {self.path} is not valid UTF-8 JSON: {exc}"
            ) from exc
        except OSError as exc:
            raise DictionaryFetchError(
                f"Failed to read verb dictionary from {self.path}: {exc}"
            ) from exc

    def _read(self) -> Any:
        with open(self.path, encoding="utf-8") as f:
            return json.load(f)

    def describe(self) -> str:
        return self.path


class VerbDictionaryLoader:
    """
    Fetches the verb dictionary once and shares the result.

    Every caller awaits the same fetch. A failed fetch is not retried:
    all later calls raise the same error.
    """

    def __init__(self, source: DictionarySource):
        self.source = source
        self._cache: AsyncOnce[VerbDictionary] = AsyncOnce("verb dictionary")

    async def load(self) -> VerbDictionary:
        """
        Get the verb dictionary, fetching it on first call.

        :return: Read-only mapping of verb key to entry, in source order
        :raises: DictionaryFetchError, DictionaryFormatError
        """
        return await self._cache.get(self._fetch)

    def reset(self) -> None:
        """Drop the cached dictionary. Only meant for tests."""
        self._cache.reset()

    async def _fetch(self) -> VerbDictionary:
        location = self.source.describe()
        logger.info(f"Fetching verb dictionary from {location}")

        try:
            payload = await self.source.fetch()
        except VerbLookupError as exc:
            logger.warning(f"Verb dictionary fetch failed: {exc}")
            raise

        dictionary = self._validate(payload, location)
        logger.info(f"Loaded verb dictionary with {len(dictionary)} verbs")
        return dictionary

    def _validate(self, payload: Any, location: str) -> VerbDictionary:
        if not isinstance(payload, dict):
            raise DictionaryFormatError(
                f"Verb dictionary at {location} must be a JSON object, "
                f"got {type(payload).__name__}"
            )

        for verb in payload:
            if not isinstance(verb, str) or not verb.strip():
                raise DictionaryFormatError(
                    f"Verb dictionary at {location} has an invalid verb key: {verb!r}"
                )

        return MappingProxyType(dict(payload))
