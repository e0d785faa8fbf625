from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..config.configuration import Configuration
from ..core.context import RunContext
from ..core.fs import is_text_file, read_lines
from ..core.logging import log_event
from ..core.scan import discover_files
from ..errors import FragmentationError
from .artifacts import artifact_path, write_artifact
from .markers import fragment_ends, fragment_starts
from .model import DEFAULT_FRAGMENT, Fragment, FragmentBuilder, default_fragment


@dataclass
class FragmentationResult:
    code_file: Path
    artifacts: dict[str, Path] = field(default_factory=dict)
    skipped: bool = False


class Fragmenter:
    """Splits one code file into its `_default` fragment and the named fragments its markers declare.

    Marker lines never reach an artifact. A line holding opening markers is treated
    only as an opening line, even when it also carries closing markers.
    """

    def __init__(self, config: Configuration, code_file: Path) -> None:
        self.config = config
        self.code_file = code_file if code_file.is_absolute() else config.code_root / code_file

    @property
    def relative_path(self) -> str:
        return self.code_file.relative_to(self.config.code_root).as_posix()

    def fragmentize(self) -> tuple[list[str], dict[str, Fragment]]:
        builders: dict[str, FragmentBuilder] = {}
        content: list[str] = []
        for line in read_lines(self.code_file):
            cursor = len(content)
            starts = fragment_starts(line)
            if starts:
                for name in starts:
                    builder = builders.setdefault(name, FragmentBuilder(name, self.relative_path))
                    builder.open(cursor)
                continue
            ends = fragment_ends(line)
            if ends:
                for name in ends:
                    builder = builders.get(name)
                    if builder is None:
                        raise FragmentationError(
                            f"cannot end the fragment `{name}` as it wasn't started",
                            path=self.relative_path,
                        )
                    builder.close(cursor)
                continue
            content.append(line)
        fragments = {name: builder.build(len(content)) for name, builder in builders.items()}
        fragments[DEFAULT_FRAGMENT] = default_fragment(len(content))
        return content, fragments

    def write_fragments(self) -> FragmentationResult:
        if not is_text_file(self.code_file):
            return FragmentationResult(self.code_file, skipped=True)
        content, fragments = self.fragmentize()
        rendered = {name: fragment.render(content, self.config.separator) for name, fragment in fragments.items()}
        result = FragmentationResult(self.code_file)
        for name, lines in rendered.items():
            result.artifacts[name] = write_artifact(artifact_path(self.config, self.code_file, name), lines)
        return result


@dataclass
class FragmentationReport:
    results: list[FragmentationResult] = field(default_factory=list)
    errors: dict[str, FragmentationError] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


def fragmentize_all(ctx: RunContext, config: Configuration) -> FragmentationReport:
    """Write artifacts for every included code file; a failing file does not stop the others."""
    report = FragmentationReport()
    files = discover_files(config.code_root, config.code_includes, config.code_excludes)
    log_event(ctx, "info", "fragmentation", "start", files=len(files), fragments_dir=config.fragments_dir)
    for code_file in files:
        fragmenter = Fragmenter(config, code_file)
        try:
            result = fragmenter.write_fragments()
        except FragmentationError as exc:
            report.errors[fragmenter.relative_path] = exc
            log_event(ctx, "error", "fragmentation", "file_failed", file=fragmenter.relative_path, error=exc.message)
            continue
        report.results.append(result)
        if result.skipped:
            log_event(ctx, "debug", "fragmentation", "skip_binary", file=fragmenter.relative_path)
        else:
            log_event(ctx, "debug", "fragmentation", "write", file=fragmenter.relative_path, fragments=len(result.artifacts))
    log_event(ctx, "info", "fragmentation", "finish", files=len(report.results), errors=len(report.errors))
    return report
