"""
Constants and enums for the theory library and the GML exchange convention.

No magic strings - use enums for constrained values.
"""

from enum import Enum

# Exchange convention tags - frozen for v1
PROTOCOL_TAG = "9x3"
PROTOCOL_VERIFIED_TAG = "9x3_VERIFIED"
SCHEMA_TAG = "GML_UNIVERSAL"
PAYLOAD_FORMAT = "GML_UNIVERSAL_v1"
ENVELOPE_VERSION = "1.0.0"

DEFAULT_SOURCE = "gml-theory"
DEFAULT_DOMAIN = "gml-ecosystem.com"

# Serialized payloads shorter than this travel inline in the URL
INLINE_PAYLOAD_LIMIT = 2000

# URL query parameter names
IMPORT_PARAM = "import"
IMPORT_KEY_PARAM = "importKey"

STORAGE_KEY_PREFIX = "gml_export_"

# Export input fields that count as musical content
CONTENT_FIELDS: tuple[str, ...] = ("riffs", "triads", "quartet", "patterns", "motifs")


class ContentType(str, Enum):
    """Envelope content types, dispatched on by importers."""

    RIFF_COLLECTION = "riff_collection"
    TRIAD_PROGRESSION = "triad_progression"
    QUARTET_SCORE = "quartet_score"
    GENERIC = "generic"


class TransportMethod(str, Enum):
    """How an export reaches the target app."""

    URL_PARAMS = "url_params"  # Inline ?import=<json>
    STORAGE = "localStorage"  # ?importKey=<key>, payload in the store


class ExportStatus(str, Enum):
    """Outcome tag of an export attempt."""

    READY = "READY"  # Inline URL built
    SECURED = "SECURED"  # Payload stored, key URL built
    FAILED_VALIDATION = "FAILED_VALIDATION"
    UNKNOWN_APP = "UNKNOWN_APP"


class ImportStatus(str, Enum):
    """Lifecycle of a received import."""

    RECEIVED = "received"
    PROCESSED = "processed"


class ErrorMessages:
    """Standardized error messages."""

    INVALID_NOTE = "Invalid note name: '{note}'. Expected a letter A-G, optional '#', and octave."
    INVALID_PITCH = "Invalid pitch: {pitch}. Must be an integer 0-127."
    INVALID_FREQUENCY = "Invalid frequency: {frequency}. Must be positive and within pitch range."
    UNKNOWN_SCALE = "Unknown scale '{name}' or invalid root '{root}'."
    UNKNOWN_CHORD = "Unknown chord '{name}' or invalid root '{root}'."
    INVALID_CHORD_NOTES = "Chord analysis needs at least two valid note names."
    INVALID_VOICING = "Both chords need at least one valid note name."
    UNKNOWN_APP = "Unknown app: {app}"
    NOT_AN_OBJECT = "Data must be an object"
    NO_CONTENT = "Data must contain musical content"
    NOT_SERIALIZABLE = "Data could not be packaged for export: {error}"
    UNKNOWN_CONTEXT = "No recommendations for context '{context}'."


class SuccessMessages:
    """Standardized success messages."""

    EXPORT_INLINE = "Export to '{app}' ready as URL parameters."
    EXPORT_STORED = "Export to '{app}' stored under key '{key}'."
    MIDI_WRITTEN = "Wrote {voices} voice(s) to {path}."
