"""Compacting a fragmented disk map."""

from __future__ import annotations

from collections.abc import Iterator

Span = tuple["int | None", int, int]
"""A run on the disk: file id (None when free), first block, length."""

_DIGITS = "0123456789"


def _sizes(text: str) -> Iterator[int]:
    for char in text:
        if char not in _DIGITS:
            raise ValueError(f"invalid disk map digit {char!r}")
        yield int(char)


def parse_blocks(text: str) -> list[int | None]:
    """Expand a disk map into one entry per block: a file id or None."""
    blocks: list[int | None] = []
    for idx, size in enumerate(_sizes(text)):
        blocks.extend([idx // 2 if idx % 2 == 0 else None] * size)
    return blocks


def compact_blocks(blocks: list[int | None]) -> list[int | None]:
    """Move file blocks one at a time from the end into the leftmost gaps."""
    disk = list(blocks)
    front, back = 0, len(disk) - 1
    while front < back:
        if disk[front] is not None:
            front += 1
        elif disk[back] is None:
            back -= 1
        else:
            disk[front], disk[back] = disk[back], disk[front]
            front += 1
            back -= 1
    return disk


def block_checksum(blocks: list[int | None]) -> int:
    """Sum of block index times file id."""
    if not blocks:
        raise ValueError("empty disk")
    return sum(idx * file_id for idx, file_id in enumerate(blocks) if file_id is not None)


def parse_files(text: str) -> list[Span]:
    """Read a disk map as runs of files and free space, skipping empty runs."""
    spans: list[Span] = []
    position = 0
    for idx, size in enumerate(_sizes(text)):
        if size:
            spans.append((idx // 2 if idx % 2 == 0 else None, position, size))
        position += size
    return spans


def compact_files(files: list[Span]) -> list[Span]:
    """Move whole files, highest id first, into the leftmost gap that fits them."""
    pending = [span for span in files if span[0] is not None]
    free = [span for span in files if span[0] is None]
    result: list[Span] = []
    while pending:
        file_id, start, length = pending.pop()
        slot = next(
            (
                idx
                for idx, (_, free_start, free_length) in enumerate(free)
                if free_length >= length and free_start < start
            ),
            None,
        )
        if slot is None:
            result.append((file_id, start, length))
            continue
        _, free_start, free_length = free.pop(slot)
        result.append((file_id, free_start, length))
        if free_length > length:
            free.insert(slot, (None, free_start + length, free_length - length))
    return result


def file_checksum(files: list[Span]) -> int:
    """Sum of block index times file id over every file run."""
    if not files:
        raise ValueError("empty disk")
    return sum(
        file_id * sum(range(start, start + length))
        for file_id, start, length in files
        if file_id is not None
    )


def part_one(text: str) -> int:
    """Checksum after moving single blocks."""
    return block_checksum(compact_blocks(parse_blocks(text)))


def part_two(text: str) -> int:
    """Checksum after moving whole files."""
    return file_checksum(compact_files(parse_files(text)))