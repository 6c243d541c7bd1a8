# /// script
# requires-python = ">=3.9"
# dependencies = [
#     "pathspec",  # For .gitignore processing
#     "rich",      # For better CLI output
# ]
# ///

import os
import sys
import stat
import mmap
import time
import argparse
import subprocess
import threading
from enum import Enum
from pathlib import Path
from dataclasses import dataclass
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
import pathspec
from rich.console import Console
from rich.progress import (
    Progress,
    SpinnerColumn,
    BarColumn,
    TextColumn,
    TimeElapsedColumn,
    MofNCompleteColumn,
)
from rich.logging import RichHandler
from typing import Optional, List, Dict, Any

__version__ = "0.2.0"

# Configure logging with rich
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
)
log = logging.getLogger("rich")
console = Console()

DEFAULT_THRESHOLD_MB = 0.1
BYTES_PER_MB = 1024 * 1024
# Files at or above this size are memory-mapped instead of read into a buffer
MMAP_CUTOVER = 1024 * 1024
BINARY_SAMPLE_SIZE = 1024
CONTROL_CHAR_RATIO = 0.30
DELIMITER = "=" * 80
UNREADABLE_MARKER = "[Binary file or read error]"
DEFAULT_PERF_LOG = "perf.log"

EXCLUDED_DIRS = frozenset(
    {
        # Version control
        ".git",
        ".svn",
        ".hg",
        ".bzr",
        # Dependencies / vendored code
        "node_modules",
        "vendor",
        "deps",
        "bower_components",
        ".venv",
        "venv",
        # Build output
        "target",
        "build",
        "dist",
        "out",
        "__pycache__",
        ".pytest_cache",
        ".mypy_cache",
        ".tox",
        "cmake-build-debug",
        "cmake-build-release",
        ".next",
        ".nuxt",
        # IDE / editor
        ".vscode",
        ".idea",
        ".vs",
        # Coverage reports
        "coverage",
        "htmlcov",
        ".nyc_output",
    }
)

EXCLUDED_FILES = frozenset(
    {
        # OS metadata
        ".DS_Store",
        "Thumbs.db",
        "desktop.ini",
        # Lock files
        "package-lock.json",
        "yarn.lock",
        "pnpm-lock.yaml",
        "Cargo.lock",
        "poetry.lock",
        "Pipfile.lock",
        "composer.lock",
        "Gemfile.lock",
        "uv.lock",
        # Ignore files
        ".gitignore",
        ".dockerignore",
        ".npmignore",
        ".prettierignore",
        ".eslintignore",
        # Container descriptors
        "Dockerfile",
        "docker-compose.yml",
        "docker-compose.yaml",
        "compose.yml",
        "compose.yaml",
    }
)

BINARY_EXTENSIONS = frozenset(
    {
        # Images
        "jpg", "jpeg", "png", "gif", "bmp", "ico", "svg", "webp", "tif", "tiff", "psd",
        # Audio
        "mp3", "wav", "flac", "ogg", "aac", "m4a",
        # Video
        "mp4", "avi", "mov", "mkv", "webm", "wmv",
        # Archives
        "zip", "tar", "gz", "rar", "7z", "bz2", "xz", "tgz", "jar", "whl",
        # Documents
        "pdf", "doc", "docx", "xls", "xlsx", "ppt", "pptx", "odt",
        # Executables / objects
        "exe", "dll", "so", "dylib", "bin", "obj", "o", "a", "lib", "class", "pyc", "wasm",
        # Fonts
        "ttf", "otf", "woff", "woff2", "eot",
        # Embedded databases
        "db", "sqlite", "sqlite3",
    }
)

# Control bytes tolerated in text: tab, line feed, carriage return
_TEXT_CONTROL_BYTES = frozenset(b"\t\n\r")


class ConversionError(Exception):
    """Fatal failure of a conversion run."""


class Verdict(Enum):
    INCLUDE = "include"
    EXCLUDE_BY_PATH = "excluded"
    EXCLUDE_BINARY = "binary"
    EXCLUDE_OVERSIZE = "oversize"


@dataclass(frozen=True)
class FileCandidate:
    path: Path
    relative_path: Path
    size: int


class RunStatistics:
    """Processed/skipped counters shared by all workers."""

    def __init__(self):
        self._lock = threading.Lock()
        self.processed = 0
        self.skipped = 0

    def increment_processed(self) -> None:
        with self._lock:
            self.processed += 1

    def increment_skipped(self) -> None:
        with self._lock:
            self.skipped += 1

    @property
    def total(self) -> int:
        with self._lock:
            return self.processed + self.skipped


class OutputAggregator:
    """
    Single owner of the output stream.

    Workers never touch the file handle; they submit whole formatted records
    through append(), which holds the lock for the full write so records
    cannot interleave.
    """

    def __init__(self, output_path: Path):
        self.output_path = output_path
        self._lock = threading.Lock()
        self._flushed = False
        try:
            self._handle = open(output_path, "wb")
        except OSError as e:
            raise ConversionError(
                f"Cannot create output file {output_path}: {e}"
            ) from e

    def append(self, record: bytes) -> None:
        with self._lock:
            try:
                self._handle.write(record)
            except (OSError, ValueError) as e:
                raise ConversionError(
                    f"Failed to write to {self.output_path}: {e}"
                ) from e

    def flush(self) -> None:
        with self._lock:
            if self._flushed:
                raise ConversionError(
                    f"Output {self.output_path} was already flushed"
                )
            try:
                self._handle.flush()
            except OSError as e:
                raise ConversionError(
                    f"Failed to flush {self.output_path}: {e}"
                ) from e
            self._flushed = True

    def close(self) -> None:
        with self._lock:
            if not self._handle.closed:
                self._handle.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


class Timer:
    """Named timed phase, reported on the console and appended to a perf log."""

    def __init__(self, label: str, log_path: Optional[Path] = None):
        self.label = label
        self.log_path = log_path
        self.start = time.perf_counter()

    def elapsed_ms(self) -> int:
        return int((time.perf_counter() - self.start) * 1000)

    def log_to_file(self, file_path: Path) -> None:
        with open(file_path, "a", encoding="utf-8") as perf_f:
            perf_f.write(f"{self.label}: {self.elapsed_ms()}ms\n")

    def print_elapsed(self) -> None:
        console.print(f"[dim]{self.label}: {self.elapsed_ms()}ms[/]")
        if self.log_path is None:
            return
        try:
            self.log_to_file(self.log_path)
        except OSError as e:
            log.warning(f"Failed to log performance data to {self.log_path}: {e}")


def _start_timer(label: str, options: Dict[str, Any]) -> Optional[Timer]:
    if not options.get("profile"):
        return None
    return Timer(label, Path(options.get("perf_log") or DEFAULT_PERF_LOG))


def build_options(
    threshold_mb: float = DEFAULT_THRESHOLD_MB,
    include_all: bool = False,
    debug: bool = False,
    workers: Optional[int] = None,
    profile: bool = False,
    perf_log: Optional[str] = None,
    gitignore: bool = False,
    sort_output: bool = False,
    show_progress: bool = True,
) -> Dict[str, Any]:
    """Assemble the options dictionary passed down to every pipeline stage."""
    if threshold_mb < 0:
        raise ConversionError(f"Threshold must not be negative: {threshold_mb}")
    if workers is not None and workers < 1:
        raise ConversionError(f"Worker count must be at least 1: {workers}")
    return {
        "threshold_mb": threshold_mb,
        "threshold_bytes": int(threshold_mb * BYTES_PER_MB),
        "include_all": include_all,
        "debug": debug,
        "workers": workers or os.cpu_count() or 1,
        "profile": profile,
        "perf_log": perf_log or DEFAULT_PERF_LOG,
        "gitignore": gitignore,
        "sort_output": sort_output,
        "show_progress": show_progress,
        # Filled in per run
        "spec": None,
        "output_relative": None,
        "perf_relative": None,
    }


def format_file_size(size: int) -> str:
    """Format a byte count in base-1024 units (B, KB, MB, GB)."""
    units = ["B", "KB", "MB", "GB"]
    value = float(size)
    unit_index = 0
    while value >= 1024.0 and unit_index < len(units) - 1:
        value /= 1024.0
        unit_index += 1
    if unit_index == 0:
        return f"{int(value)} {units[0]}"
    return f"{value:.1f} {units[unit_index]}"


def load_gitignore(root: Path) -> Optional[pathspec.PathSpec]:
    """Load .gitignore patterns from the root folder."""
    gitignore_path = root / ".gitignore"
    if not gitignore_path.is_file():
        log.debug(f".gitignore not found in {root}")
        return None
    try:
        with open(gitignore_path, "r", encoding="utf-8") as gitignore_file:
            lines = gitignore_file.readlines()
    except (OSError, UnicodeDecodeError) as e:
        log.warning(f"Could not read .gitignore {gitignore_path}: {e}")
        return None
    if not lines:
        log.debug("No .gitignore patterns found.")
        return None
    return pathspec.GitIgnoreSpec.from_lines(lines)


def is_excluded_dir_name(name: str) -> bool:
    return name.lower() in EXCLUDED_DIRS


def is_excluded_path(relative_path: Path, options: Dict[str, Any]) -> bool:
    """
    Path-only exclusion rule, evaluated before any file I/O.

    Shared by discovery (as a pre-filter) and by classify(), so both always
    agree on which paths are excluded.
    """
    parts = relative_path.parts
    if any(is_excluded_dir_name(part) for part in parts[:-1]):
        return True
    if relative_path.name in EXCLUDED_FILES:
        return True
    for key in ("output_relative", "perf_relative"):
        generated = options.get(key)
        if generated is not None and relative_path == generated:
            return True
    spec = options.get("spec")
    if spec is not None and spec.match_file(relative_path.as_posix()):
        return True
    return False


def has_binary_extension(path: Path) -> bool:
    extension = path.suffix[1:].lower() if path.suffix else ""
    return extension in BINARY_EXTENSIONS


def read_sample(path: Path, limit: int = BINARY_SAMPLE_SIZE) -> Optional[bytes]:
    """
    Read the file prefix used for binary detection.

    Returns None if the file no longer exists; other read errors yield an
    empty sample so the file is treated as text.
    """
    try:
        with open(path, "rb") as in_f:
            return in_f.read(limit)
    except FileNotFoundError:
        return None
    except OSError as e:
        log.debug(f"Could not sample {path}, assuming text: {e}")
        return b""


def is_binary_sample(sample: bytes) -> bool:
    """A sample is binary if it holds a NUL byte or is >30% control characters."""
    if not sample:
        return False
    if b"\x00" in sample:
        return True
    control = sum(
        1
        for byte in sample
        if (byte < 0x20 or byte == 0x7F) and byte not in _TEXT_CONTROL_BYTES
    )
    return control / len(sample) > CONTROL_CHAR_RATIO


def classify(
    candidate: FileCandidate,
    options: Dict[str, Any],
    sample: Optional[bytes] = None,
) -> Verdict:
    """
    Decide whether a candidate ends up in the output.

    Args:
        candidate: the file to classify
        options: processing options ('include_all', 'threshold_bytes', ...)
        sample: prefix bytes of the file; read on demand when omitted
    """
    if is_excluded_path(candidate.relative_path, options):
        return Verdict.EXCLUDE_BY_PATH
    if candidate.size == 0 or not candidate.path.exists():
        return Verdict.EXCLUDE_BY_PATH

    if options.get("include_all", False):
        return Verdict.INCLUDE

    if has_binary_extension(candidate.path):
        return Verdict.EXCLUDE_BINARY
    if sample is None:
        sample = read_sample(candidate.path)
        if sample is None:
            return Verdict.EXCLUDE_BY_PATH
    if is_binary_sample(sample):
        return Verdict.EXCLUDE_BINARY

    if candidate.size > options["threshold_bytes"]:
        return Verdict.EXCLUDE_OVERSIZE

    return Verdict.INCLUDE


def _decode(data) -> str:
    try:
        return str(data, "utf-8")
    except UnicodeDecodeError:
        return str(data, "utf-8", errors="replace")


def read_file_content(path: Path, file_size: int) -> Optional[str]:
    """
    Read a file as text, choosing the read strategy by size.

    Returns None when the file cannot be read; invalid UTF-8 is replaced
    rather than treated as a failure.
    """
    try:
        if file_size < MMAP_CUTOVER:
            return _decode(path.read_bytes())
        with open(path, "rb") as in_f:
            with mmap.mmap(in_f.fileno(), 0, access=mmap.ACCESS_READ) as mapped:
                return _decode(mapped)
    except (OSError, ValueError) as e:
        log.debug(f"Error reading file {path}: {e}")
        return None


def format_record(candidate: FileCandidate, content: Optional[str]) -> bytes:
    """Build the header + payload block written for one included file."""
    payload = content if content is not None else UNREADABLE_MARKER
    record = (
        f"{DELIMITER}\n"
        f"File: {candidate.relative_path.as_posix()}\n"
        f"Size: {format_file_size(candidate.size)}\n"
        f"{DELIMITER}\n\n"
        f"{payload}\n\n"
    )
    return record.encode("utf-8", errors="replace")


def build_file_list(root: Path, options: Dict[str, Any]) -> List[FileCandidate]:
    """
    Walk root and return a FileCandidate for every regular file that passes
    the path-only exclusion rule. Symlinks are never followed; unreadable
    entries are skipped.
    """
    candidates = []
    for current, dirs, files in os.walk(root, topdown=True, followlinks=False):
        current_path = Path(current)
        dirs[:] = [d for d in dirs if not is_excluded_dir_name(d)]

        for filename in files:
            filepath = current_path / filename
            relative_path = filepath.relative_to(root)
            if is_excluded_path(relative_path, options):
                if options.get("debug"):
                    log.debug(f"Skipping excluded file: {relative_path}")
                continue
            try:
                st = os.lstat(filepath)
            except OSError:
                continue
            if not stat.S_ISREG(st.st_mode):
                continue
            candidates.append(FileCandidate(filepath, relative_path, st.st_size))

    candidates.sort(key=lambda c: c.relative_path.as_posix())
    return candidates


def _refresh_metadata(candidate: FileCandidate) -> Optional[FileCandidate]:
    """Re-stat a candidate; None means it vanished since discovery."""
    try:
        size = os.stat(candidate.path).st_size
    except FileNotFoundError:
        return None
    except OSError as e:
        raise ConversionError(
            f"Failed to read metadata for {candidate.relative_path}: {e}"
        ) from e
    if size == candidate.size:
        return candidate
    return FileCandidate(candidate.path, candidate.relative_path, size)


def _log_skip(candidate: FileCandidate, verdict: Verdict) -> None:
    if verdict is Verdict.EXCLUDE_BINARY:
        log.debug(f"Skipping binary file: {candidate.relative_path}")
    elif verdict is Verdict.EXCLUDE_OVERSIZE:
        log.debug(
            f"Skipping large file: {candidate.relative_path} "
            f"({format_file_size(candidate.size)})"
        )
    else:
        log.debug(f"Skipping excluded file: {candidate.relative_path}")


def process_file(
    candidate: FileCandidate,
    options: Dict[str, Any],
    stats: RunStatistics,
    sink,
) -> Optional[Verdict]:
    """
    Run classify -> extract -> append for one candidate.

    Args:
        candidate: the file to process
        options: processing options
        stats: shared run counters
        sink: callable receiving (candidate, record bytes)

    Returns the verdict, or None if the run was stopped before this file.
    """
    stop_event = options.get("stop_event")
    if stop_event is not None and stop_event.is_set():
        return None

    refreshed = _refresh_metadata(candidate)
    if refreshed is None:
        verdict = Verdict.EXCLUDE_BY_PATH
    else:
        candidate = refreshed
        verdict = classify(candidate, options)

    if verdict is not Verdict.INCLUDE:
        if options.get("debug"):
            _log_skip(candidate, verdict)
        stats.increment_skipped()
        return verdict

    content = read_file_content(candidate.path, candidate.size)
    if content is None and options.get("debug"):
        log.debug(f"Could not read file as text: {candidate.relative_path}")

    sink(candidate, format_record(candidate, content))
    stats.increment_processed()
    return verdict


def _run_pool(
    candidates: List[FileCandidate],
    options: Dict[str, Any],
    stats: RunStatistics,
    sink,
    progress: Progress,
    task,
) -> None:
    """Fan candidates out over the worker pool; re-raise the first fatal error."""
    stop_event = threading.Event()
    options = dict(options, stop_event=stop_event)
    first_error: Optional[BaseException] = None

    def worker(candidate: FileCandidate):
        progress.update(
            task, description=f"Processing: {candidate.relative_path.as_posix()}"
        )
        try:
            return process_file(candidate, options, stats, sink)
        except Exception:
            # Stop queued workers without waiting on the main thread
            stop_event.set()
            raise

    with ThreadPoolExecutor(max_workers=options["workers"]) as executor:
        future_to_candidate = {
            executor.submit(worker, candidate): candidate for candidate in candidates
        }
        for future in as_completed(future_to_candidate):
            if future.cancelled():
                continue
            error = future.exception()
            if error is not None and first_error is None:
                first_error = error
                stop_event.set()
                for pending in future_to_candidate:
                    pending.cancel()
            progress.update(task, advance=1)

    if first_error is not None:
        if isinstance(first_error, ConversionError):
            raise first_error
        raise ConversionError(str(first_error)) from first_error


def _make_progress(options: Dict[str, Any]) -> Progress:
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
        disable=not options.get("show_progress", True),
    )


def validate_root(repo_path: Path) -> Path:
    if not repo_path.exists():
        raise ConversionError(f"Path does not exist: {repo_path}")
    if not repo_path.is_dir():
        raise ConversionError(f"Path is not a directory: {repo_path}")
    try:
        with os.scandir(repo_path):
            pass
    except OSError as e:
        raise ConversionError(f"Cannot read directory {repo_path}: {e}") from e
    return repo_path.resolve()


def _relative_to_root(path: Path, root: Path) -> Optional[Path]:
    try:
        return path.resolve().relative_to(root)
    except ValueError:
        return None


def convert_repository_to_text(
    repo_path: Path,
    output_path: Path,
    options: Dict[str, Any],
) -> RunStatistics:
    """
    Convert the tree under repo_path into a single text file at output_path.

    The root is validated before the output file is created, so a bad root
    never leaves an output file behind.
    """
    total_timer = _start_timer("Total conversion", options)
    root = validate_root(Path(repo_path))
    output_path = Path(output_path)

    options = dict(options)
    options["spec"] = load_gitignore(root) if options.get("gitignore") else None
    options["output_relative"] = _relative_to_root(output_path, root)
    if options.get("profile"):
        options["perf_relative"] = _relative_to_root(
            Path(options.get("perf_log") or DEFAULT_PERF_LOG), root
        )

    stats = RunStatistics()
    with OutputAggregator(output_path) as aggregator:
        discovery_timer = _start_timer("File discovery", options)
        candidates = build_file_list(root, options)
        if discovery_timer:
            discovery_timer.print_elapsed()

        if not candidates:
            console.print("[yellow]No files found to process[/]")
            aggregator.flush()
            if total_timer:
                total_timer.print_elapsed()
            return stats

        log.debug(f"Found {len(candidates)} candidate files under {root}")

        buffered: Dict[str, bytes] = {}
        buffer_lock = threading.Lock()

        def sink(candidate: FileCandidate, record: bytes) -> None:
            if options.get("sort_output"):
                with buffer_lock:
                    buffered[candidate.relative_path.as_posix()] = record
            else:
                aggregator.append(record)

        processing_timer = _start_timer("File processing", options)
        with _make_progress(options) as progress:
            task = progress.add_task("Processing files", total=len(candidates))
            _run_pool(candidates, options, stats, sink, progress, task)
            progress.update(task, description="Conversion complete!")
        if processing_timer:
            processing_timer.print_elapsed()

        for key in sorted(buffered):
            aggregator.append(buffered[key])

        flush_timer = _start_timer("File flush", options)
        aggregator.flush()
        if flush_timer:
            flush_timer.print_elapsed()

    if total_timer:
        total_timer.print_elapsed()
    return stats


def get_repo_name(repo_path: Path) -> str:
    """Name of the git toplevel containing repo_path, else the directory name."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            cwd=repo_path,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode == 0 and result.stdout.strip():
            name = Path(result.stdout.strip()).name
            if name:
                return name
    except OSError as e:
        log.debug(f"git not available: {e}")
    return repo_path.resolve().name or "repository"


def path_type(path_str: str) -> Path:
    """Convert string to Path and verify it exists and is a directory."""
    path = Path(path_str)
    if not path.exists():
        raise argparse.ArgumentTypeError(f"Path '{path_str}' does not exist.")
    if not path.is_dir():
        raise argparse.ArgumentTypeError(f"Path '{path_str}' is not a directory.")
    return path


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, got {value}.")
    return number


def non_negative_float(value: str) -> float:
    number = float(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"Threshold must not be negative: {value}.")
    return number


def build_parser() -> argparse.ArgumentParser:
    description = """
    Convert a local repository into a single text file.

    Walks the given folder, skips VCS/dependency/build folders, binary files
    and files above the size threshold, and writes every remaining file with
    a File/Size header into one document.
    """
    parser = argparse.ArgumentParser(
        prog="textify",
        description=description,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "path",
        nargs="?",
        type=path_type,
        default=Path("."),
        help="Path to the repository (default: current directory).",
    )
    parser.add_argument(
        "-o",
        "--output",
        default="",
        help="Output file (default: <repo-name>.textify.txt).",
        metavar="FILE",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    filter_group = parser.add_argument_group("Filtering")
    filter_group.add_argument(
        "-t",
        "--threshold",
        type=non_negative_float,
        default=DEFAULT_THRESHOLD_MB,
        help="File size threshold in MB; larger files are excluded (default: 0.1).",
        metavar="MB",
    )
    filter_group.add_argument(
        "--include-all",
        action="store_true",
        help="Include all files regardless of size or type.",
    )
    filter_group.add_argument(
        "--gitignore",
        action="store_true",
        help="Also exclude paths matched by the root .gitignore.",
    )

    behavior_group = parser.add_argument_group("Behavior Options")
    behavior_group.add_argument(
        "-j",
        "--workers",
        type=positive_int,
        default=None,
        help="Number of worker threads (default: CPU count).",
    )
    behavior_group.add_argument(
        "--sort",
        action="store_true",
        help="Write records in path order instead of completion order.",
    )
    behavior_group.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode with verbose logging.",
    )
    behavior_group.add_argument(
        "--perf",
        action="store_true",
        help="Time each phase and append the timings to the perf log.",
    )
    behavior_group.add_argument(
        "--perf-log",
        default=DEFAULT_PERF_LOG,
        help="Performance log file (default: perf.log).",
        metavar="FILE",
    )
    behavior_group.add_argument(
        "--no-progress",
        action="store_true",
        help="Do not display the progress bar.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Convert a repository to text. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    if args.debug:
        log.setLevel(logging.DEBUG)
        log.debug("Debug mode enabled.")
    else:
        log.setLevel(logging.INFO)

    repo_path = args.path.resolve()
    repo_name = get_repo_name(repo_path)
    output_path = Path(args.output or f"{repo_name}.textify.txt")

    log.debug(f"Repository path: {repo_path}")
    log.debug(f"Repository name: {repo_name}")
    log.debug(f"Output file: {output_path}")

    console.print(f"[green]Processing repository: {repo_name}[/]")

    try:
        options = build_options(
            threshold_mb=args.threshold,
            include_all=args.include_all,
            debug=args.debug,
            workers=args.workers,
            profile=args.perf,
            perf_log=args.perf_log,
            gitignore=args.gitignore,
            sort_output=args.sort,
            show_progress=not args.no_progress and console.is_terminal,
        )
        stats = convert_repository_to_text(repo_path, output_path, options)
    except ConversionError as e:
        log.error(str(e))
        return 1

    console.print(
        f"Processed [green]{stats.processed}[/] files, "
        f"skipped [yellow]{stats.skipped}[/] files"
    )
    console.print(
        f"[bold green]✓[/] Repository converted successfully to: [blue]{output_path}[/]"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
