"""The ``package.json`` manifest written into generated projects."""

from __future__ import annotations

import copy
import json
import logging
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "BABEL_CONFIG",
    "DEPENDENCIES",
    "DEV_DEPENDENCIES",
    "DIRECTORIES",
    "ENGINES",
    "ESLINT_CONFIG",
    "JEST_CONFIG",
    "Manifest",
    "SCRIPTS",
    "build_manifest",
]


LOGGER = logging.getLogger(__name__)

ENGINES: Dict[str, str] = {
    "node": "~8.5.0",
    "npm": ">=5.3.0",
}

SCRIPTS: Dict[str, str] = {
    "prestart": "npm run -s build",
    "start": "node dist/index.js",
    "dev": 'nodemon src/index.js --exec "node -r dotenv/config -r babel-register"',
    "clean": "rimraf dist",
    "build": "npm run clean && mkdir -p dist && babel src -s -D -d dist",
    "test": "jest",
    "lint": "esw -w src test",
}

DEPENDENCIES: Dict[str, str] = {
    "@koa/cors": "2",
    "babel-cli": "^6.26.0",
    "babel-plugin-transform-object-rest-spread": "^6.26.0",
    "babel-preset-env": "^1.6.0",
    "koa": "^2.3.0",
    "koa-bodyparser": "^4.2.0",
    "koa-morgan": "^1.0.1",
    "koa-router": "^7.2.1",
    "rimraf": "^2.6.2",
}

DEV_DEPENDENCIES: Dict[str, str] = {
    "babel-eslint": "^8.0.0",
    "babel-jest": "^21.0.2",
    "babel-register": "^6.26.0",
    "dotenv": "^4.0.0",
    "eslint": "^4.7.2",
    "eslint-plugin-import": "^2.7.0",
    "eslint-plugin-jest": "^21.1.0",
    "eslint-watch": "^3.1.2",
    "jest": "^21.1.0",
    "nodemon": "^1.12.1",
    "supertest": "^3.0.0",
}

BABEL_CONFIG: Dict[str, Any] = {
    "presets": [["env", {"targets": {"node": "current"}}]],
    "plugins": ["transform-object-rest-spread"],
    "sourceMaps": True,
    "retainLines": True,
}

ESLINT_CONFIG: Dict[str, Any] = {
    "parser": "babel-eslint",
    "plugins": ["import", "jest"],
    "parserOptions": {"ecmaVersion": 2017, "sourceType": "module"},
    "env": {"node": True, "jest": True, "es6": True},
    "extends": ["eslint:recommended"],
    "rules": {"jest/no-focused-tests": 2, "jest/no-identical-title": 2},
}

JEST_CONFIG: Dict[str, Any] = {"testEnvironment": "node"}

DIRECTORIES: Dict[str, str] = {"test": "test"}


class Manifest(BaseModel):
    """npm package manifest for a generated Koa service."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    name: str = Field(..., min_length=1, description="npm package name of the generated project.")
    version: str = Field("1.0.0", description="Initial package version.")
    private: bool = Field(True, description="Prevents accidental publication to the registry.")
    main: str = Field("dist/index.js", description="Compiled entry point.")
    engines: Dict[str, str] = Field(default_factory=lambda: dict(ENGINES))
    scripts: Dict[str, str] = Field(default_factory=lambda: dict(SCRIPTS))
    dependencies: Dict[str, str] = Field(default_factory=lambda: dict(DEPENDENCIES))
    dev_dependencies: Dict[str, str] = Field(
        default_factory=lambda: dict(DEV_DEPENDENCIES), alias="devDependencies"
    )
    babel: Dict[str, Any] = Field(default_factory=lambda: copy.deepcopy(BABEL_CONFIG))
    eslint_config: Dict[str, Any] = Field(
        default_factory=lambda: copy.deepcopy(ESLINT_CONFIG), alias="eslintConfig"
    )
    jest: Dict[str, Any] = Field(default_factory=lambda: copy.deepcopy(JEST_CONFIG))
    directories: Dict[str, str] = Field(default_factory=lambda: dict(DIRECTORIES))

    def to_json(self) -> str:
        """Serialise the manifest the way npm writes it: two-space indented."""

        payload = self.model_dump(mode="json", by_alias=True)
        return json.dumps(payload, indent=2, ensure_ascii=False)

def build_manifest(name: str) -> Manifest:
    """Return the manifest for an application called ``name``."""

    manifest = Manifest(name=name)
    LOGGER.debug(
        "built manifest for %s with %d dependencies and %d dev dependencies",
        name,
        len(manifest.dependencies),
        len(manifest.dev_dependencies),
    )
    return manifest
