"""Identity show API command."""

from collections.abc import Iterator, Sequence
from pathlib import Path

from ..config.MdmergeConfig import MdmergeConfig
from ..StageResult import StageResult
from . import IdentityShowOutput
from .identity_of import identity_of
from .IdentityError import IdentityError
from .path_of_identity import path_of_identity


def cmd_show(paths: Sequence[str], root: str | None = None) -> StageResult:
    """Show the identity of each path and the path that identity resolves to.

    Args:
        paths: Files to resolve
        root: Directory searched when resolving identities back to paths,
            defaults to the directory of each file

    A path that does not exist is reported as an error. An identity that
    resolves to no file or to several files is an internal inconsistency and
    raises IdentityError.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            prefix = MdmergeConfig.load().merge.identity_prefix
        except ValueError as e:
            result_obj.result = f"Failed to load configuration: {e}"
            result_obj.output = IdentityShowOutput(errors=[str(e)], identities={}).model_dump(mode="python")
            result_obj.success = False
            yield (1.0, "Complete")
            return

        identities: dict[str, dict[str, str]] = {}
        errors: list[str] = []
        total = max(len(paths), 1)
        for index, path in enumerate(paths):
            yield (0.1 + 0.9 * index / total, f"Resolving {path}...")
            try:
                identity = identity_of(path, prefix)
            except IdentityError as e:
                errors.append(str(e))
                continue
            search_root = root if root is not None else str(Path(path).parent)
            resolved = path_of_identity(identity, search_root)
            identities[path] = {"identity": str(identity), "resolved": str(resolved)}

        result_obj.result = f"Resolved {len(identities)} of {len(paths)} path(s)"
        result_obj.output = IdentityShowOutput(errors=errors, identities=identities).model_dump(mode="python")
        result_obj.success = not errors
        yield (1.0, "Complete")

    return StageResult(announce=f"Resolving identities of {len(paths)} file(s)...", progress_callback=do_work)
