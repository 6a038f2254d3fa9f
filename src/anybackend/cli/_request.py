"""The validated set of answers a project is generated from."""

from __future__ import annotations

from dataclasses import dataclass

from anybackend.cli._types import Feature, PackageManager

DEFAULT_PROJECT_NAME = "my-backend"
DEFAULT_PORT = 3000

_PATH_SEPARATORS = ("/", "\\")


def validate_project_name(value: str) -> str | None:
    """Return an error message for an unusable project name, or None if it is fine."""
    if value.strip() == "":
        return "Project name cannot be empty."
    if any(sep in value for sep in _PATH_SEPARATORS):
        return "Project name cannot contain path separators."
    return None


def default_mongo_uri(project_name: str) -> str:
    return f"mongodb://localhost:27017/{project_name}"


@dataclass(frozen=True, kw_only=True)
class GenerationRequest:
    """
    Answers collected for a single run.

    Attributes:
        project_name: Name of the directory to create, also the package name.
        include_auth: Generate the JWT register/login controller and routes.
        include_upload: Generate the Multer upload route.
        include_env: Generate a `.env` file and load it with dotenv.
        mongo_uri: Database URI override. Defaults to a local database named
            after the project.
        port: Port the generated server listens on.
        package_manager: Installer to run once files are written.
    """

    project_name: str
    include_auth: bool = Feature.AUTH.default
    include_upload: bool = Feature.UPLOAD.default
    include_env: bool = Feature.ENV.default
    mongo_uri: str | None = None
    port: int = DEFAULT_PORT
    package_manager: PackageManager = PackageManager.SKIP

    def __post_init__(self) -> None:
        problem = validate_project_name(self.project_name)
        if problem is not None:
            raise ValueError(problem)
        object.__setattr__(self, "project_name", self.project_name.strip())

        if not 0 < self.port < 65536:
            raise ValueError(f"Port must be between 1 and 65535, got {self.port}.")

    @property
    def resolved_mongo_uri(self) -> str:
        return self.mongo_uri or default_mongo_uri(self.project_name)

    def includes(self, feature: Feature) -> bool:
        flags: dict[Feature, bool] = {
            Feature.AUTH: self.include_auth,
            Feature.UPLOAD: self.include_upload,
            Feature.ENV: self.include_env,
        }
        return flags[feature]
