"""
LLM Module Constants

Defines string constants for the LLM subsystem to maintain consistency
and enable easy refactoring.

Version: 1.0.0
"""

# =============================================================================
# PROVIDERS
# =============================================================================

PROVIDER_DEEPSEEK = "deepseek"
PROVIDER_DEEPSEEK_DISPLAY = "DeepSeek"

# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

ENV_DEEPSEEK_API_KEY = "DEEPSEEK_API_KEY"
ENV_DEEPSEEK_BASE_URL = "DEEPSEEK_BASE_URL"

# =============================================================================
# ENDPOINTS
# =============================================================================

DEFAULT_DEEPSEEK_BASE_URL = "https://api.deepseek.com"
ENDPOINT_CHAT_COMPLETIONS = "v1/chat/completions"
ENDPOINT_MODELS = "v1/models"

# =============================================================================
# REQUEST DEFAULTS
# =============================================================================

DEFAULT_MODEL = "deepseek-chat"
DEFAULT_TEMPERATURE = 0.3
DEFAULT_MAX_TOKENS = 1000
DEFAULT_TIMEOUT_SECONDS = 60

HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
CONTENT_TYPE_JSON = "application/json"
AUTH_SCHEME_BEARER = "Bearer"

# =============================================================================
# MESSAGE FIELDS
# =============================================================================

MESSAGE_FIELD_ROLE = "role"
MESSAGE_FIELD_CONTENT = "content"

ROLE_SYSTEM = "system"
ROLE_USER = "user"
ROLE_ASSISTANT = "assistant"

PAYLOAD_FIELD_MODEL = "model"
PAYLOAD_FIELD_MESSAGES = "messages"
PAYLOAD_FIELD_TEMPERATURE = "temperature"
PAYLOAD_FIELD_MAX_TOKENS = "max_tokens"

# =============================================================================
# RESPONSE FIELDS
# =============================================================================

RESPONSE_FIELD_CHOICES = "choices"
RESPONSE_FIELD_MESSAGE = "message"
RESPONSE_FIELD_CONTENT = "content"
RESPONSE_FIELD_FINISH_REASON = "finish_reason"
RESPONSE_FIELD_USAGE = "usage"
RESPONSE_FIELD_PROMPT_TOKENS = "prompt_tokens"
RESPONSE_FIELD_COMPLETION_TOKENS = "completion_tokens"
RESPONSE_FIELD_TOTAL_TOKENS = "total_tokens"

META_MODEL = "model"
META_ID = "id"

DEFAULT_RESPONSE_ROLE = ROLE_ASSISTANT

# =============================================================================
# FINISH REASONS
# =============================================================================

FINISH_REASON_STOP = "stop"
FINISH_REASON_LENGTH = "length"
FINISH_REASON_CONTENT_FILTER = "content_filter"
FINISH_REASON_TOOL_CALLS = "tool_calls"

# =============================================================================
# MARKDOWN FENCES
# =============================================================================

# Order matters: the language-tagged fence must go before the bare one.
CODE_FENCE_JSON = "```json"
CODE_FENCE = "```"

# =============================================================================
# ERROR MESSAGES
# =============================================================================

ERROR_MSG_EMPTY_COMPLETION = "Empty response from DeepSeek"
ERROR_MSG_HTTP_STATUS = "DeepSeek {status}: {body}"
ERROR_MSG_MISSING_API_KEY = (
    "DeepSeek API key not found. Provide 'api_key' in config or set "
    "DEEPSEEK_API_KEY environment variable."
)
ERROR_MSG_TIMEOUT = "Request timed out after {timeout} seconds"
