"""Enums for CLI options."""

from enum import Enum


class Feature(str, Enum):
    """Optional features a generated backend can include."""

    AUTH = "auth"
    UPLOAD = "upload"
    ENV = "env"

    @property
    def question(self) -> str:
        questions: dict[Feature, str] = {
            Feature.AUTH: "Include Authentication (JWT login/register)?",
            Feature.UPLOAD: "Enable File Upload feature (Multer)?",
            Feature.ENV: "Use .env for Mongo URI and configuration?",
        }
        return questions[self]

    @property
    def default(self) -> bool:
        defaults: dict[Feature, bool] = {
            Feature.AUTH: True,
            Feature.UPLOAD: False,
            Feature.ENV: True,
        }
        return defaults[self]

    @property
    def dependency(self) -> tuple[str, str]:
        """npm package name and version range this feature adds to package.json."""
        dependencies: dict[Feature, tuple[str, str]] = {
            Feature.AUTH: ("jsonwebtoken", "^9.0.0"),
            Feature.UPLOAD: ("multer", "^1.4.5"),
            Feature.ENV: ("dotenv", "^16.4.5"),
        }
        return dependencies[self]


class PackageManager(str, Enum):
    """Package manager used to install the generated project's dependencies."""

    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"
    SKIP = "skip"

    @property
    def label(self) -> str:
        labels: dict[PackageManager, str] = {
            PackageManager.NPM: "npm install",
            PackageManager.PNPM: "pnpm install",
            PackageManager.YARN: "yarn install",
            PackageManager.SKIP: "Skip, I'll install later",
        }
        return labels[self]

    @property
    def command(self) -> list[str]:
        if self is PackageManager.SKIP:
            return []
        return [self.value, "install"]
