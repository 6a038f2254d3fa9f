"""Orchestrates template rendering to files on disk."""

from __future__ import annotations

import importlib.resources as ilr
import json
import logging
from pathlib import Path

from anybackend.cli._request import GenerationRequest
from anybackend.cli._types import Feature

logger = logging.getLogger(__name__)

_SCAFFOLD_PKG = "anybackend.cli.scaffold"

_DIRECTORIES: list[str] = [
    "models",
    "routes",
    "controllers",
    "config",
    "middlewares",
    "utils",
    "uploads",
]

_BASE_DEPS: dict[str, str] = {
    "express": "^4.21.1",
    "mongoose": "^8.6.1",
}

# Feature order fixes the key order inside package.json
_FEATURE_DEPS_ORDER: list[Feature] = [Feature.ENV, Feature.AUTH, Feature.UPLOAD]

_GITIGNORE_ENTRIES: list[str] = [
    "node_modules",
    ".env",
    "uploads",
]

JWT_SECRET_PLACEHOLDER = "supersecret"


def _read(filename: str, request: GenerationRequest) -> str:
    content = ilr.files(_SCAFFOLD_PKG).joinpath(filename).read_text(encoding="utf-8")
    return content.replace("__PROJECT_NAME__", request.project_name).replace(
        "__MONGO_URI__", request.resolved_mongo_uri
    )


def dependencies_for(request: GenerationRequest) -> dict[str, str]:
    """npm dependencies of the generated project, a pure function of the toggles."""
    deps = dict(_BASE_DEPS)
    for feature in _FEATURE_DEPS_ORDER:
        if request.includes(feature):
            name, version_range = feature.dependency
            deps[name] = version_range
    return deps


def package_json(request: GenerationRequest) -> str:
    pkg = {
        "name": request.project_name,
        "version": "1.0.0",
        "type": "module",
        "main": "server.js",
        "scripts": {
            "start": "node server.js",
            "dev": "nodemon server.js",
        },
        "dependencies": dependencies_for(request),
        "devDependencies": {},
    }
    return json.dumps(pkg, indent=2) + "\n"


def server_js(request: GenerationRequest) -> str:
    """Assemble server.js from the snippets each enabled feature contributes."""
    env_setup = 'import dotenv from "dotenv";\ndotenv.config();\n' if request.include_env else ""
    port = f"process.env.PORT || {request.port}" if request.include_env else str(request.port)

    mounts = [
        'import userRoutes from "./routes/userRoutes.js";',
        'app.use("/api/users", userRoutes);',
    ]
    if request.include_auth:
        mounts += [
            'import authRoutes from "./routes/authRoutes.js";',
            'app.use("/api/auth", authRoutes);',
        ]
    if request.include_upload:
        mounts += [
            'import uploadRoutes from "./routes/uploadRoutes.js";',
            'app.use("/api/upload", uploadRoutes);',
            'app.use("/uploads", express.static("uploads"));',
        ]
    mounts_str = "\n".join(mounts)

    return f"""\
import express from "express";
{env_setup}import connectDB from "./config/db.js";

// Initialize Express app
const app = express();
app.use(express.json());

// Connect to MongoDB
connectDB();

// Default route (can be used for health checks)
app.get("/", (req, res) => {{
  res.send("✅ API is running fine");
}});

// Import routes
{mounts_str}

const PORT = {port};
app.listen(PORT, () =>
  console.log(`🚀 Server running on http://localhost:${{PORT}}`)
);
"""


def env_file(request: GenerationRequest) -> str:
    lines = [
        f"MONGO_URI={request.resolved_mongo_uri}",
        f"PORT={request.port}",
    ]
    if request.include_auth:
        lines.append(f"JWT_SECRET={JWT_SECRET_PLACEHOLDER}")
    return "\n".join(lines) + "\n"


def gitignore() -> str:
    return "\n".join(_GITIGNORE_ENTRIES) + "\n"


def _files(request: GenerationRequest) -> dict[str, str]:
    files = {
        "package.json": package_json(request),
        "server.js": server_js(request),
    }
    if request.include_env:
        files[".env"] = env_file(request)
    files[".gitignore"] = gitignore()

    files["config/db.js"] = _read("db.js", request)
    files["models/User.js"] = _read("User.js", request)
    files["controllers/userController.js"] = _read("userController.js", request)
    files["routes/userRoutes.js"] = _read("userRoutes.js", request)

    if request.include_auth:
        files["controllers/authController.js"] = _read("authController.js", request)
        files["routes/authRoutes.js"] = _read("authRoutes.js", request)

    if request.include_upload:
        files["routes/uploadRoutes.js"] = _read("uploadRoutes.js", request)

    return files


def render_project(project_dir: Path, request: GenerationRequest) -> list[str]:
    """Render the scaffold to files on disk. Returns list of created file/dir names.

    Raises FileExistsError, before writing anything, if *project_dir* exists.
    """
    files = _files(request)

    project_dir.mkdir()
    for folder in _DIRECTORIES:
        (project_dir / folder).mkdir()
        logger.debug("Created directory %s", project_dir / folder)

    for name, content in files.items():
        (project_dir / name).write_text(content, encoding="utf-8")
        logger.debug("Wrote %s", project_dir / name)

    return [*files.keys(), *(f"{d}/" for d in _DIRECTORIES)]
