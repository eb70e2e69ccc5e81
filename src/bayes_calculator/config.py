"""Configuration constants for the Bayes calculator.

This module centralizes the parsing bounds, display precision and the
fixed text shown by the interactive prompts.

Usage:
    from bayes_calculator.config import (
        MIN_PERCENT,
        MAX_PERCENT,
        PERCENT_SCALE,
        DISPLAY_DECIMALS,
    )
"""

# Percentage parsing
# User input is a percentage; probabilities are stored as fractions
PERCENT_SCALE = 100.0       # 50 (percent) -> 0.5 (fraction)
MIN_PERCENT = 0.0           # Inclusive lower bound
MAX_PERCENT = 100.0         # Inclusive upper bound
PERCENT_SUFFIX = "%"        # At most one may trail the number

# Display
DISPLAY_DECIMALS = 2        # 0.66667 -> "66.67%"
LABEL_COLUMN_WIDTH = 11     # Fits "Probability"
VALUE_COLUMN_WIDTH = 15     # Fits "100.00%" with room to spare

# Prompt text
DESCRIPTION_PROMPT = "Describe the thing being calculated:"
PRIOR_PROMPT = "Enter the prior probability (in percentage, e.g., 50 or 50%):"
LIKELIHOOD_PROMPT = "Enter the likelihood (in percentage, e.g., 50 or 50%):"
EVIDENCE_PROMPT = "Enter the evidence (in percentage, e.g., 50 or 50%):"
INVALID_INPUT_MESSAGE = (
    "Invalid input: Please enter a valid percentage between 0% and 100%."
)

# Logging
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_LOG_LEVEL = "WARNING"  # Normal runs print no log records

# Exit statuses
EXIT_OK = 0
EXIT_INPUT_CLOSED = 1

VERSION = "0.1.0"
