"""
Variable substitution module.
Replaces prefixed placeholders in partial content with tag attribute values.
"""

from .substitution import VariableSubstitutor

__all__ = ['VariableSubstitutor']
