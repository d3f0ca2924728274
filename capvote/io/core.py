"""Shared functionality for ballot file I/O. Internal."""

from typing import Callable, Iterable, List, Optional, TextIO, Tuple

from capvote.vote import Ballot


class ParseError(Exception):
    """An input that is invalid according to the given format was detected.

    :param message: What is wrong with the input.
    :param line_no: 1-based number of the offending line, if known.
    """
    def __init__(self, message: str, line_no: Optional[int] = None):
        self.line_no = line_no
        if line_no is not None:
            message = f'line {line_no}: {message}'
        super().__init__(message)


def loaders(line_loader: Callable[..., List[Ballot]]
            ) -> Tuple[Callable[..., List[Ballot]],
                       Callable[..., List[Ballot]]]:
    """Create load() and loads() functions from a line parsing function."""

    def load(file: TextIO, **kwargs) -> List[Ballot]:
        return line_loader(file, **kwargs)

    def loads(text: str, **kwargs) -> List[Ballot]:
        return line_loader(iter(text.split('\n')), **kwargs)

    return load, loads


def dumpers(line_dumper: Callable[..., Iterable[str]]
            ) -> Tuple[Callable[..., None], Callable[..., str]]:
    """Create dump() and dumps() functions from a line generator function."""

    def dump(file: TextIO, *args, **kwargs) -> None:
        for line in line_dumper(*args, **kwargs):
            file.write(line + '\n')

    def dumps(*args, **kwargs) -> str:
        return ''.join(
            line + '\n' for line in line_dumper(*args, **kwargs)
        )

    return dump, dumps
