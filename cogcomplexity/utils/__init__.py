from cogcomplexity.utils.files import iter_source_files

__all__ = ["iter_source_files"]
