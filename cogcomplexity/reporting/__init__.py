from cogcomplexity.reporting.formatters import containers_over, format_json, format_text

__all__ = ["containers_over", "format_json", "format_text"]
