"""Shared fixtures for clientgen tests.

The sample document covers the shapes the generator cares about: a GET-only
path, a path with GET and POST, a parameterized path, a body given by $ref,
an inline body, a dangling $ref and a non-JSON body.
"""

from __future__ import annotations

from typing import Any

import pytest

from clientgen.models import Document, parse_document



@pytest.fixture
def raw_spec() -> dict[str, Any]:
    return {
        "openapi": "3.0.0",
        "info": {"title": "Sample", "version": "1.0"},
        "paths": {
            "/ping": {
                "get": {"summary": "Health check"},
            },
            "/users": {
                "get": {"summary": "List users"},
                "post": {
                    "summary": "Create user",
                    "requestBody": {
                        "content": {
                            "application/json": {
                                "schema": {"$ref": "#/components/schemas/User"},
                            }
                        }
                    },
                },
            },
            "/users/{id}": {
                "parameters": [{"name": "id", "in": "path"}],
                "put": {
                    "requestBody": {
                        "content": {
                            "application/json": {
                                "schema": {
                                    "type": "object",
                                    "properties": {
                                        "tags": {"type": "array", "items": {"type": "string"}},
                                        "age": {"type": "integer", "format": "int32"},
                                        "pet": {"$ref": "#/components/schemas/Pet"},
                                    },
                                },
                            }
                        }
                    },
                },
                "delete": {"summary": "Remove user"},
            },
            "/orphans": {
                "post": {
                    "summary": "Dangling reference",
                    "requestBody": {
                        "content": {
                            "application/json": {
                                "schema": {"$ref": "#/components/schemas/Missing"},
                            }
                        }
                    },
                },
            },
            "/uploads": {
                "post": {
                    "summary": "Upload file",
                    "requestBody": {
                        "content": {
                            "multipart/form-data": {
                                "schema": {
                                    "type": "object",
                                    "properties": {"file": {"type": "string"}},
                                },
                            }
                        }
                    },
                },
            },
        },
        "components": {
            "schemas": {
                "User": {
                    "type": "object",
                    "properties": {
                        "name": {"type": "string"},
                        "id": {"type": "integer"},
                    },
                },
                "Pet": {"type": "object", "properties": {"kind": {"type": "string"}}},
            }
        },
    }


@pytest.fixture
def document(raw_spec: dict[str, Any]) -> Document:
    return parse_document(raw_spec)
