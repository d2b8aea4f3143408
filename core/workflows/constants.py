"""
Workflow Module Constants

Defines string constants for the workflow parsing module to maintain
consistency and enable easy refactoring.

Version: 1.0.0
"""

# =============================================================================
# NODE TYPES
# =============================================================================

NODE_TYPE_TRIGGER = "trigger"
NODE_TYPE_ACTION = "action"
NODE_TYPE_FILTER = "filter"
NODE_TYPE_LLM_AGENT = "llmAgent"

# =============================================================================
# GRAPH FIELDS
# =============================================================================

FIELD_NODES = "nodes"
FIELD_EDGES = "edges"
FIELD_ID = "id"
FIELD_TYPE = "type"
FIELD_LABEL = "label"
FIELD_CONFIG = "config"
FIELD_SOURCE = "source"
FIELD_TARGET = "target"

# =============================================================================
# PARSE ERROR CODES
# =============================================================================

CODE_INVALID_PROMPT = "INVALID_PROMPT"
CODE_PARSE_ERROR = "PARSE_ERROR"
CODE_MAX_RETRIES_EXCEEDED = "MAX_RETRIES_EXCEEDED"
CODE_INTERNAL_ERROR = "INTERNAL_ERROR"

# =============================================================================
# RETRY POLICY
# =============================================================================

MAX_RETRIES = 3
RETRY_DELAY_MS = 1000

# =============================================================================
# PROMPT
# =============================================================================

WORKFLOW_PROMPT_VERSION = "1.0.0"

# =============================================================================
# VALIDATION MESSAGE FORMATTING
# =============================================================================

VALIDATION_PREFIX = "Invalid workflow structure: "
VALIDATION_SEPARATOR = ", "
VALIDATION_PATH_SEPARATOR = "."
VALIDATION_ROOT_PATH = "(root)"
VALIDATION_REQUIRED = "Required"
PYDANTIC_MISSING_TYPE = "missing"

# =============================================================================
# ERROR MESSAGES
# =============================================================================

ERROR_PROMPT_REQUIRED = "Prompt is required and must be a non-empty string"
ERROR_PARSE_FAILED = "Failed to parse workflow"
ERROR_PARSE_TIMEOUT = "Workflow parsing timed out"
ERROR_INTERNAL = "An error occurred while parsing the workflow"
