from .source_location import (
    SourceLocation,
    finding_path_to_pointer,
    format_source,
    lookup_source,
)
