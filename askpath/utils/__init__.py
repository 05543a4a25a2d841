"""Shared utilities for paths, configuration, logging and console prompts.

===================================================================================
SUBMODULE STRUCTURE
===================================================================================

paths.py:
    project_root() → project absolute path
    default_config_path() → <project_root>/config.yml

config.py:
    load_config(path=None) → ConsoleConfig from YAML
    A missing default file yields defaults, a missing explicit path raises

console_gate.py:
    prompt_gate() → context manager marking a blocking prompt
    is_prompt_active() → bool, nesting-aware and thread-safe

logging.py:
    configure_logging(level, log_file, console) → "askpath" logger
    RichHandler on stderr (held back during prompts) + optional file log
"""
