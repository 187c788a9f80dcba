"""Exception hierarchy for batch-level (fatal) failures"""


class LlmsTxtError(Exception):
    """Base class for errors that abort a whole run."""


class ConfigError(LlmsTxtError, ValueError):
    """Invalid llmstxt.yaml contents or settings values."""


class InputError(LlmsTxtError):
    """Input directory is missing or is not a directory."""


class SitemapError(LlmsTxtError):
    """Sitemap cannot be read, or a URL cannot be mapped to a safe local path."""


class OutputError(LlmsTxtError):
    """Output directory cannot be created or the output file cannot be written."""
