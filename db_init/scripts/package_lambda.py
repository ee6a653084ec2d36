"""
Lambda zip builder for the database initializer.

Usage:
    python -m db_init.scripts.package_lambda build
    python -m db_init.scripts.package_lambda build --output build/db_init.zip

Purpose:
- Install runtime dependencies for the Lambda platform (manylinux wheels)
- Copy the db_init package next to them
- Zip the result for Pulumi (config key: lambda_artifact)

Dependencies: pip (subprocess)
System role: Build helper for the initializer Lambda deployment
"""

import logging
import shutil
import subprocess
import sys
from pathlib import Path

logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

RUNTIME_REQUIREMENTS = [
    "sqlalchemy>=2.0",
    "psycopg[binary]>=3.1",
    "pydantic>=2.5",
    "pydantic-settings>=2.1",
    "python-dotenv>=1.0",
    "requests>=2.31",
]


class LambdaPackager:
    """Build the initializer deployment zip."""

    def __init__(
        self,
        output: Path | None = None,
        python_version: str = "3.12",
        platform: str = "manylinux2014_x86_64",
    ) -> None:
        """
        Initialize packager.

        Args:
            output: Zip path (default: <project>/build/db_init.zip)
            python_version: Lambda runtime Python version
            platform: Wheel platform tag matching the Lambda architecture
        """
        self.project_root = Path(__file__).parent.parent.parent
        self.package_dir = self.project_root / "db_init"
        self.output = output or self.project_root / "build" / "db_init.zip"
        self.staging_dir = self.output.parent / "db_init_staging"
        self.python_version = python_version
        self.platform = platform

    def install_dependencies(self) -> None:
        """
        Install runtime requirements into the staging directory.

        Raises:
            subprocess.CalledProcessError: pip failed
        """
        logger.info(f"Installing dependencies into {self.staging_dir}")
        subprocess.run(
            [
                sys.executable,
                "-m",
                "pip",
                "install",
                "--quiet",
                "--target",
                str(self.staging_dir),
                "--platform",
                self.platform,
                "--python-version",
                self.python_version,
                "--implementation",
                "cp",
                "--only-binary=:all:",
                *RUNTIME_REQUIREMENTS,
            ],
            check=True,
        )

    def copy_sources(self) -> None:
        """Copy db_init into the staging directory (without build helpers)."""
        shutil.copytree(
            self.package_dir,
            self.staging_dir / "db_init",
            ignore=shutil.ignore_patterns("__pycache__", "*.pyc", "scripts"),
        )

    def build(self) -> Path:
        """
        Build the zip from scratch.

        Returns:
            Path: Path of the written zip
        """
        if self.staging_dir.exists():
            shutil.rmtree(self.staging_dir)
        self.staging_dir.mkdir(parents=True)

        self.install_dependencies()
        self.copy_sources()

        archive = shutil.make_archive(
            str(self.output.with_suffix("")),
            "zip",
            root_dir=self.staging_dir,
        )
        shutil.rmtree(self.staging_dir)

        logger.info(f"✓ Lambda package written: {archive}")
        return Path(archive)


def main():
    """CLI entry point."""
    if len(sys.argv) < 2 or sys.argv[1] != "build":
        print("Usage: python -m db_init.scripts.package_lambda build [--output PATH]")
        sys.exit(1)

    output = None
    if "--output" in sys.argv:
        idx = sys.argv.index("--output")
        if idx + 1 < len(sys.argv):
            output = Path(sys.argv[idx + 1])

    LambdaPackager(output=output).build()


if __name__ == "__main__":
    main()
