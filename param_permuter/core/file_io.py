"""
Reading URL lists and wordlists, and writing generated URLs.
"""

import logging
from pathlib import Path
from typing import Iterable, List, TextIO, Union

from .exceptions import ConfigurationError, ErrorCode, InputOutputError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_lines(stream: Iterable[str]) -> List[str]:
    """Strip every line and drop blank ones."""
    return [line.strip() for line in stream if line.strip()]


def read_file_lines(path: PathLike) -> List[str]:
    """Read a whole file into a list of stripped, non-empty lines."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = read_lines(f)
    except UnicodeDecodeError as e:
        raise InputOutputError(ErrorCode.IO_READ_FAILED, str(path), e) from e
    except FileNotFoundError as e:
        raise ConfigurationError(f"File does not exist: {path}", ErrorCode.CONFIG_FILE_NOT_FOUND, path=str(path)) from e
    except OSError as e:
        raise InputOutputError(ErrorCode.IO_READ_FAILED, str(path), e) from e

    logger.debug(f"Read {len(lines)} lines from {path}")
    return lines


def load_urls(list_path: PathLike = None, stdin: TextIO = None) -> List[str]:
    """
    Load the URLs to permute.

    Args:
        list_path: File holding one URL per line. Takes precedence over stdin.
        stdin: Stream to read from when no file is given. Ignored when it is a TTY.

    Returns:
        List of URLs in input order.
    """
    if list_path:
        return read_file_lines(list_path)

    if stdin is not None and not stdin.isatty():
        try:
            urls = read_lines(stdin)
        except (OSError, UnicodeDecodeError) as e:
            raise InputOutputError(ErrorCode.IO_READ_FAILED, "<stdin>", e) from e
        logger.debug(f"Read {len(urls)} URLs from stdin")
        return urls

    raise ConfigurationError("No URLs were given", ErrorCode.CONFIG_MISSING_REQUIRED)


def load_wordlist(path: PathLike) -> List[str]:
    """Load the parameter name wordlist."""
    if not path:
        raise ConfigurationError("Parameter wordlist file is not given", ErrorCode.CONFIG_MISSING_REQUIRED)
    return read_file_lines(path)


def ensure_output_available(path: PathLike) -> None:
    """Refuse to run when the output file already exists."""
    if path and Path(path).exists():
        raise ConfigurationError(
            f"Output file already exists: {path}",
            ErrorCode.CONFIG_OUTPUT_EXISTS,
            path=str(path)
        )


def format_output(urls: List[str]) -> str:
    """One URL per line, newline terminated."""
    if not urls:
        return ""
    return "\n".join(urls) + "\n"


def write_output(urls: List[str], output_path: PathLike = None, stream: TextIO = None) -> None:
    """
    Write generated URLs to a new file, or to a stream when no path is given.

    The output file is created exclusively and is never overwritten.
    """
    content = format_output(urls)

    if output_path:
        try:
            with open(output_path, "x", encoding="utf-8") as f:
                f.write(content)
        except FileExistsError as e:
            raise ConfigurationError(
                f"Output file already exists: {output_path}",
                ErrorCode.CONFIG_OUTPUT_EXISTS,
                path=str(output_path)
            ) from e
        except OSError as e:
            raise InputOutputError(ErrorCode.IO_WRITE_FAILED, str(output_path), e) from e
        logger.info(f"Wrote {len(urls)} URLs to {output_path}")
        return

    if stream is None:
        raise ValueError("Either output_path or stream must be given")
    stream.write(content)
    stream.flush()
