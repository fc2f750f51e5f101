"""All magic values live here — no inline literals anywhere else."""

# Whisper endpoint / request shape
WHISPER_MODEL = "whisper-1"
OPENAI_BASE_URL = "https://api.openai.com/v1"
TRANSCRIPTION_URL = OPENAI_BASE_URL + "/audio/transcriptions"
AUDIO_FILENAME = "audio.m4a"
AUDIO_CONTENT_TYPE = "audio/m4a"
REQUEST_TIMEOUT: float = 60.0

# Retry policy
MAX_ATTEMPTS = 3
BACKOFF_BASE_SECONDS: float = 1.0
# Symmetric jitter: the delay is scaled by a factor in [1 - J, 1 + J].
BACKOFF_JITTER: float = 0.3
DEFAULT_RETRY_AFTER_SECONDS = 15
RETRYABLE_STATUSES = frozenset({429, 503})
STATUS_RATE_LIMITED = 429
STATUS_PAYLOAD_TOO_LARGE = 413
HEADER_RETRY_AFTER = "retry-after"

# Error codes
CODE_FILE_NOT_FOUND = "FILE_NOT_FOUND"
CODE_RATE_LIMIT = "RATE_LIMIT"
CODE_FILE_TOO_LARGE = "FILE_TOO_LARGE"
CODE_API_ERROR = "API_ERROR"
CODE_NETWORK_ERROR = "NETWORK_ERROR"
CODE_UNKNOWN_ERROR = "UNKNOWN_ERROR"

# Log messages
MSG_ATTEMPT = "Whisper API attempt %d/%d - File size: %s"
MSG_ATTEMPT_OK = "Whisper API success on attempt %d"
MSG_ATTEMPT_FAILED = "Whisper API error on attempt %d: Status %s"
MSG_API_ERROR_DETAILS = "API error details: %s"
MSG_RETRYING = "Retrying in %.2fs (%s)"
MSG_FINAL_FAILURE = "Transcription failed [%s]: %s"
MSG_UNKNOWN_FAILURE = "Unknown transcription error with no details"
MSG_NETWORK = "network error"
MSG_POST = "POST %s (model=%s, language=%s)"
MSG_CLEANUP_FAILED = "Error cleaning up audio file: %s"
SIZE_UNKNOWN = "unknown"

# Error messages carried by the exceptions
ERR_FILE_NOT_FOUND = "Audio file does not exist: %s"
ERR_FILE_UNREADABLE = "Audio file could not be read: %s (%s)"
ERR_RATE_LIMIT = "Rate limit reached (429) after all retries (retry after %ss)"
ERR_FILE_TOO_LARGE = "Audio file is too large (413)"
ERR_API_STATUS = "Error %d while transcribing audio"
ERR_NO_TEXT = "Transcription response did not contain text"
ERR_NETWORK = "Network error while transcribing audio: %s"
ERR_UNKNOWN = "Unknown error while transcribing audio"
ERR_MAX_ATTEMPTS = "max_attempts must be at least 1"

# User-facing messages
MSG_USER_FILE_NOT_FOUND = "The recording could not be found — record again."
MSG_USER_RATE_LIMIT = "Rate limit reached. Wait %d seconds and try again."
MSG_USER_FILE_TOO_LARGE = "The recording is too large. Try a shorter one."
MSG_USER_API_ERROR = "Transcription failed (%d): %s"
MSG_USER_NETWORK = "Could not reach the transcription service — check your connection."
MSG_USER_UNKNOWN = "Unknown error while transcribing audio — please try again."

# CLI
CLI_PROG = "voicenote"
CLI_DESCRIPTION = "Transcribe a recorded clip."
CLI_HELP_PATH = "local audio clip (m4a)"
CLI_HELP_LANGUAGE = "ISO language code, e.g. 'es'"
CLI_HELP_DELETE = "remove the clip afterwards, whatever the outcome"
