"""Publishing of package assets into the host application.

Packages register directories they can hand over to the host (migration
files) under a tag. Publishing copies every file of the tagged directories
into the host's destination byte for byte. The package never runs the files
it publishes.

Usage:
    publisher = Publisher(logger=get_logger())
    publisher.publishes({MIGRATIONS_SOURCE: "alembic/versions"}, tag="migrations")

    match publisher.publish("migrations"):
        case Success(value=paths):
            ...
        case Failure(error=err):
            ...
"""

import shutil
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from sentinel.core.enums import ErrorCode
from sentinel.core.errors import DomainError, NotFoundError, ValidationError
from sentinel.core.result import Failure, Result, Success

if TYPE_CHECKING:
    from sentinel.domain.protocols.logger_protocol import LoggerProtocol


@dataclass(frozen=True, slots=True)
class PublishMapping:
    """Source directory paired with its default destination.

    Attributes:
        source: Directory inside the package.
        destination: Host directory receiving the files.
    """

    source: Path
    destination: Path


@dataclass(frozen=True, slots=True, kw_only=True)
class PublishError(DomainError):
    """Copy failure while publishing.

    Attributes:
        path: File that failed to copy.
    """

    path: str


class Publisher:
    """Registry of publishable directories keyed by tag."""

    def __init__(self, logger: "LoggerProtocol | None" = None) -> None:
        self._mappings: dict[str, list[PublishMapping]] = {}
        self._logger = logger

    def publishes(self, paths: Mapping[Path | str, Path | str], *, tag: str) -> None:
        """Register source directories (keys) and destinations (values) under tag.

        Registering the same source again under a tag replaces its destination.
        """
        mappings = self._mappings.setdefault(tag, [])
        for source, destination in paths.items():
            mapping = PublishMapping(Path(source), Path(destination))
            mappings[:] = [m for m in mappings if m.source != mapping.source]
            mappings.append(mapping)

    def tags(self) -> list[str]:
        """Return all registered tags, sorted."""
        return sorted(self._mappings)

    def mappings(self, tag: str) -> list[PublishMapping]:
        """Return the mappings registered under tag (empty if unknown)."""
        return list(self._mappings.get(tag, ()))

    def publish(
        self,
        tag: str,
        destination: Path | str | None = None,
        *,
        force: bool = False,
    ) -> Result[list[Path], DomainError]:
        """Copy every file registered under tag into the host.

        Existing files are left untouched unless force is set.

        Args:
            tag: Publish tag ("migrations").
            destination: Overrides the registered destination of every mapping.
            force: Overwrite files that already exist.

        Returns:
            Success(list[Path]) with the files written (skipped ones excluded),
            or Failure(NotFoundError) for an unknown tag,
            Failure(ValidationError) for a missing source or a destination
            that is not a directory (nothing is copied in either case),
            Failure(PublishError) if a copy fails, listing the files already
            written in its details.
        """
        mappings = self._mappings.get(tag)
        if not mappings:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.PUBLISH_TAG_NOT_FOUND,
                    message=f"Nothing is registered for publishing under tag '{tag}'",
                    resource_type="publish_tag",
                    resource_id=tag,
                )
            )

        targets: list[tuple[PublishMapping, Path]] = []
        for mapping in mappings:
            target_dir = Path(destination) if destination is not None else mapping.destination

            if not mapping.source.is_dir():
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.PUBLISH_SOURCE_MISSING,
                        message=f"Source directory does not exist: {mapping.source}",
                        field="source",
                    )
                )
            if target_dir.exists() and not target_dir.is_dir():
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.PUBLISH_DESTINATION_INVALID,
                        message=f"Destination is not a directory: {target_dir}",
                        field="destination",
                    )
                )
            targets.append((mapping, target_dir))

        # Every mapping is validated before the first file is copied
        written: list[Path] = []
        for mapping, target_dir in targets:
            for source_file in sorted(mapping.source.rglob("*")):
                if not source_file.is_file() or "__pycache__" in source_file.parts:
                    continue
                target = target_dir / source_file.relative_to(mapping.source)

                if target.exists() and not force:
                    if self._logger is not None:
                        self._logger.warning(
                            "publish_skipped_existing",
                            tag=tag,
                            path=str(target),
                        )
                    continue

                try:
                    target.parent.mkdir(parents=True, exist_ok=True)
                    shutil.copyfile(source_file, target)
                except OSError as e:
                    if self._logger is not None:
                        self._logger.error(
                            "publish_copy_failed",
                            error=e,
                            tag=tag,
                            path=str(target),
                        )
                    return Failure(
                        error=PublishError(
                            code=ErrorCode.PUBLISH_COPY_FAILED,
                            message=f"Failed to copy {source_file.name}: {e}",
                            path=str(target),
                            details={"written": ", ".join(str(p) for p in written)},
                        )
                    )
                written.append(target)

        if self._logger is not None:
            self._logger.info(
                "publish_completed",
                tag=tag,
                files=[str(path) for path in written],
            )
        return Success(value=written)
