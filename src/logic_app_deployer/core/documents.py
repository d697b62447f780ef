"""
Definition and parameters document sources.

A workflow definition (or its parameters) can come from one of three
places. Each is modelled as its own source type and the caller's raw
flags are collapsed into exactly one of them by select_source():

    InlineSource(document)      - JSON text or an already parsed value
    FileSource(path)            - local JSON file, read at resolve time
    LinkSource(link)            - externally hosted document (URI + version)

Precedence when several are given: file path, then inline value, then
link. The link is only used when neither of the others is present.

Usage:
    from logic_app_deployer.core.documents import resolve_definition

    definition, definition_link = resolve_definition(args)
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from logic_app_deployer import constants as CONSTANTS
from .exceptions import DocumentParseError, DocumentReadError
from .models import ContentLink, NewLogicAppArgs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InlineSource:
    document: Any


@dataclass(frozen=True)
class FileSource:
    path: str


@dataclass(frozen=True)
class LinkSource:
    link: ContentLink


DocumentSource = Union[InlineSource, FileSource, LinkSource]


# ==========================================
# Source Selection
# ==========================================

def select_source(
    kind: str,
    inline: Any = None,
    file_path: Optional[str] = None,
    link_uri: Optional[str] = None,
    link_content_version: Optional[str] = None
) -> Optional[DocumentSource]:
    """
    Collapse the three alternative inputs into a single source.

    Args:
        kind: "definition" or "parameters", used in log messages
        inline: Inline JSON text or parsed value
        file_path: Path to a JSON file
        link_uri: URI of an externally hosted document
        link_content_version: Content version of the linked document

    Returns:
        The selected source, or None if nothing was given
    """
    if link_uri is None and link_content_version is not None:
        logger.warning(
            f"Ignoring {kind} link content version '{link_content_version}': no {kind} link URI given"
        )

    if file_path is not None:
        ignored = []
        if inline is not None:
            ignored.append(f"inline {kind}")
        if link_uri is not None:
            ignored.append(f"{kind} link")
        if ignored:
            logger.warning(f"{kind.capitalize()} file path overrides {' and '.join(ignored)}")
        return FileSource(file_path)

    if inline is not None:
        if link_uri is not None:
            logger.warning(f"Inline {kind} overrides {kind} link")
        return InlineSource(inline)

    if link_uri is not None:
        return LinkSource(ContentLink(uri=link_uri, content_version=link_content_version))

    return None


# ==========================================
# Reading & Parsing
# ==========================================

def resolve_path(path: str) -> Path:
    """Expand '~' and anchor relative paths at the current working directory."""
    resolved = Path(path).expanduser()
    if not resolved.is_absolute():
        resolved = Path.cwd() / resolved
    return resolved


def parse_json_text(text: str, source: str) -> Any:
    """
    Parse JSON text.

    Raises:
        DocumentParseError: If the text is not valid JSON
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentParseError(source, original_error=e)


def read_json_file(path: str, kind: str) -> Any:
    """
    Read and parse a JSON file.

    Raises:
        DocumentReadError: If the file cannot be read
        DocumentParseError: If the content is not valid UTF-8 JSON
    """
    resolved = resolve_path(path)
    logger.debug(f"Reading {kind} from {resolved}")
    try:
        # utf-8-sig tolerates the BOM some editors write
        text = resolved.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise DocumentParseError(f"{kind} file '{resolved}'", original_error=e)
    except OSError as e:
        raise DocumentReadError(str(resolved), original_error=e)
    return parse_json_text(text, f"{kind} file '{resolved}'")


def load_document(
    source: Optional[DocumentSource],
    kind: str
) -> Tuple[Any, Optional[ContentLink]]:
    """
    Turn a source into (document, link). At most one of the two is set.
    """
    if source is None:
        return None, None
    if isinstance(source, LinkSource):
        return None, source.link
    if isinstance(source, FileSource):
        return read_json_file(source.path, kind), None
    if isinstance(source.document, str):
        return parse_json_text(source.document, f"inline {kind}"), None
    return source.document, None


# ==========================================
# Workflow Parameters
# ==========================================

def _is_arm_parameters_file(document: Dict[str, Any]) -> bool:
    return (
        isinstance(document.get(CONSTANTS.ARM_PARAMETERS_KEY), dict)
        and any(key in document for key in CONSTANTS.ARM_MARKER_KEYS)
    )


def normalize_parameters(document: Any, source: str) -> Dict[str, Dict[str, Any]]:
    """
    Convert a parameters document into {name: WorkflowParameter-shaped dict}.

    ARM parameter files are unwrapped to their "parameters" object. An entry
    that already carries type/value/metadata/description keeps those keys
    and any other key is dropped with a warning. Any other entry becomes
    {"value": entry}.

    Raises:
        DocumentParseError: If the document is not a JSON object
    """
    if not isinstance(document, dict):
        raise DocumentParseError(
            source,
            reason=f"expected a JSON object, got {type(document).__name__}"
        )

    if _is_arm_parameters_file(document):
        document = document[CONSTANTS.ARM_PARAMETERS_KEY]

    parameters = {}
    for name, entry in document.items():
        if isinstance(entry, dict) and any(key in entry for key in CONSTANTS.WORKFLOW_PARAMETER_KEYS):
            dropped = sorted(key for key in entry if key not in CONSTANTS.WORKFLOW_PARAMETER_KEYS)
            if dropped:
                logger.warning(f"Parameter '{name}' in {source}: ignoring unsupported keys {dropped}")
            parameters[name] = {
                key: entry[key] for key in CONSTANTS.WORKFLOW_PARAMETER_KEYS if key in entry
            }
        else:
            parameters[name] = {"value": entry}
    return parameters


# ==========================================
# Resolution from Raw Arguments
# ==========================================

def resolve_definition(args: NewLogicAppArgs) -> Tuple[Any, Optional[ContentLink]]:
    """Resolve the workflow definition into (definition, definition_link)."""
    source = select_source(
        "definition",
        inline=args.definition,
        file_path=args.definition_file_path,
        link_uri=args.definition_link_uri,
        link_content_version=args.definition_link_content_version,
    )
    return load_document(source, "definition")


def resolve_parameters(
    args: NewLogicAppArgs
) -> Tuple[Optional[Dict[str, Dict[str, Any]]], Optional[ContentLink]]:
    """Resolve the workflow parameters into (parameters, parameters_link)."""
    source = select_source(
        "parameters",
        inline=args.parameters,
        file_path=args.parameter_file_path,
        link_uri=args.parameter_link_uri,
        link_content_version=args.parameter_link_content_version,
    )
    document, link = load_document(source, "parameters")
    if document is None:
        return None, link

    if isinstance(source, FileSource):
        description = f"parameters file '{resolve_path(source.path)}'"
    else:
        description = "inline parameters"
    return normalize_parameters(document, description), link
