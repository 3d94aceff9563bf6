"""
Custom exceptions for template context generation.

This module defines the error types raised while turning a GraphQL schema
into a template context.
"""

from typing import Any, Optional


class CodegenError(Exception):
    """Base exception for codegen core errors."""

    def __init__(self, message: str, type_name: Optional[str] = None):
        self.type_name = type_name
        super().__init__(message)


class UnclassifiableTypeError(CodegenError):
    """
    Raised when a schema type matches none of the six GraphQL named type kinds.

    This usually means the type object was created by a different load of the
    ``graphql`` package than the one this library imported, so ``isinstance``
    checks against the known type classes fail.
    """

    def __init__(self, type_name: str, type_def: Any = None):
        self.type_def = type_def
        message = (
            f"Unexpected GraphQL type definition: {type_name} "
            f"(As string: {type_def!s}). "
            "Please check that you are importing only one instance of the "
            "'graphql' package."
        )
        super().__init__(message, type_name)
