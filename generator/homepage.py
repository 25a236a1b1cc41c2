"""Locating and replacing the listing containers inside the homepage document.

This is plain string surgery on the exported homepage, not an HTML parse.
A container is found by the literal ``id="..."`` attribute of its opening
tag and ends either where its ``<div`` / ``</div`` nesting closes or at a
fixed end marker.
"""

OPEN_TAG = "<div"
CLOSE_TAG = "</div"
CLOSE_TAG_FULL = "</div>"
GRID_LOADER = '<span class="pxl-grid-loader"></span>'


class HomepageSectionError(Exception):
    """A listing container could not be replaced in the homepage."""


class MarkerNotFoundError(HomepageSectionError):
    """The container's id marker does not occur in the document."""


class SectionBoundaryError(HomepageSectionError):
    """The id marker is present but the end of the container could not be found."""


def id_marker(container_id: str) -> str:
    return f'id="{container_id}"'


def _find_open_tag(document: str, container_id: str, label: str) -> tuple[int, int]:
    marker = id_marker(container_id)
    marker_index = document.find(marker)
    if marker_index == -1:
        raise MarkerNotFoundError(f"Could not find {label} section marker in index.html")
    start = document.rfind(OPEN_TAG, 0, marker_index)
    if start == -1:
        start = marker_index
    return start, marker_index + len(marker)


def find_depth_bounded_section(document: str, container_id: str, label: str) -> tuple[int, int]:
    """Return ``(start, end)`` of the container including its closing ``</div>``."""
    start, search_from = _find_open_tag(document, container_id, label)
    depth = 1
    i = search_from
    while i < len(document):
        if document.startswith(OPEN_TAG, i):
            depth += 1
            i += len(OPEN_TAG)
            continue
        if document.startswith(CLOSE_TAG, i):
            depth -= 1
            if depth == 0:
                return start, i + len(CLOSE_TAG_FULL)
            i += len(CLOSE_TAG)
            continue
        i += 1
    raise SectionBoundaryError(f"Could not find end of {label} section in index.html")


def find_marker_bounded_section(document: str, container_id: str, end_marker: str, label: str) -> tuple[int, int]:
    """Return ``(start, end)`` of the container up to and including ``end_marker``."""
    start, search_from = _find_open_tag(document, container_id, label)
    end = document.find(end_marker, search_from)
    if end == -1:
        raise SectionBoundaryError(f"Could not find end of {label} section in index.html")
    return start, end + len(end_marker)


def replace_depth_bounded_section(document: str, container_id: str, new_section: str, label: str) -> str:
    start, end = find_depth_bounded_section(document, container_id, label)
    return document[:start] + new_section + document[end:]


def replace_marker_bounded_section(
    document: str, container_id: str, new_section: str, label: str, end_marker: str = GRID_LOADER
) -> str:
    start, end = find_marker_bounded_section(document, container_id, end_marker, label)
    return document[:start] + new_section + document[end:]
