"""Exception hierarchy for solr-commander."""

from pathlib import Path


class SolrCommanderError(Exception):
    """Base exception for all solr-commander errors.

    All exceptions in this package inherit from this class,
    allowing callers to catch all solr-commander errors with
    a single except clause.
    """

    pass


# Configuration Errors
class ConfigError(SolrCommanderError):
    """Configuration-related errors."""

    pass


class ConfigParseError(ConfigError):
    """Configuration file has invalid syntax."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid config at {path}: {detail}")


class ConfigValidationError(ConfigError):
    """Configuration value is invalid."""

    def __init__(self, key: str, value: object, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid config value for '{key}': {reason}")


# Builder Errors
class BuilderConsumedError(SolrCommanderError):
    """A query builder was used again after build() consumed it."""

    def __init__(self, builder_name: str) -> None:
        self.builder_name = builder_name
        super().__init__(f"{builder_name} has already been built and cannot be reused")


# Solr Errors
class SolrError(SolrCommanderError):
    """Errors raised while talking to a Solr instance."""

    pass


class SolrRequestError(SolrError):
    """The HTTP request failed before a response body could be read."""

    pass


class SolrDeserializeError(SolrError):
    """The response body is not JSON or does not match the expected shape."""

    def __init__(self, url: str, detail: str) -> None:
        self.url = url
        self.detail = detail
        super().__init__(f"Failed to deserialize response from {url}: {detail}")


class SolrResponseError(SolrError):
    """Solr answered with an error object in the response body."""

    def __init__(self, code: int, msg: str, metadata: list[str] | None = None) -> None:
        self.code = code
        self.msg = msg
        self.metadata = metadata or []
        super().__init__(f"Solr error {code}: {msg}")


# Client Errors
class SolrClientError(SolrError):
    """Errors detected by the client before or around a request."""

    pass


class InvalidUrlError(SolrClientError):
    """The Solr URL could not be parsed."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Failed to parse Solr URL: {url!r}")


class InvalidHostError(SolrClientError):
    """The Solr URL has no host component."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Solr URL has no host: {url!r}")


class CoreNotFoundError(SolrClientError):
    """The requested core does not exist on the Solr instance."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Core not found: {name}")
