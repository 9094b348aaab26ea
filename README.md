# rustedos

The data structures of a small operating-system kernel, modelled in plain
Python. Nothing touches real hardware: physical memory is a dictionary of
4 KiB pages, zero-filled on first touch, and the paging, allocation and
scheduling code runs on top of it.

## What is inside

- `rustedos.address`: `PhysicalMemory` (`page`, `read`, `write`), and the
  integer types `PhysAddr`, `VirtAddr`, `PhysPageNum` and `VirtPageNum`, with
  page-number/address conversion and `VirtPageNum.indices()`, the three Sv39
  page-table indices.
- `rustedos.frame_allocator`: `FrameAllocator` hands out zeroed frames as
  `FrameTracker`s. It reuses released frames first and raises `MemoryError`
  when the range is used up. A tracker is returned with `release()` or by
  using it as a context manager. Freeing a frame that is not allocated raises
  `ValueError`.
- `rustedos.page_table`: `PageTable`, `PageTableEntry` and `PTEFlags`
  (`V`, `R`, `W`, `X`, `U`). The table supports `map`, `unmap` (which raises
  `KeyError` for an unmapped page), `translate`, `satp_token` and
  `PageTable.from_token`. The tables are stored in the simulated memory.
- `rustedos.segment`: `MemorySegment`, a range of virtual pages with its own
  frames, offering `copy_data` and `release`.
- `rustedos.memory_set`: `MemorySet`, an address space with
  `insert_segment`, `remove_segment`, `translate`, `get_size`, `satp_token`
  and `clone`, which copies every segment's contents.
- `rustedos.user_buffer`: `get_user_buffer` returns a `UserBuffer` of live
  per-page views that supports `len`, iteration, `read` and `write`. There are
  also `get_user_string`, `get_user_value` and `put_user_value`. All of these
  reach into an address space through its token and raise `ValueError` for
  unmapped addresses.
- `rustedos.linked_list`: `LinkedList`, a last-in first-out free list of
  addresses.
- `rustedos.heap_allocator`: `BuddySystemAllocator` (`add`, `alloc`,
  `dealloc` with buddy merging), plus `get_size` and `prev_power_of_two`.
- `rustedos.elf_decoder`: `ElfFile.parse` decodes a 64-bit little-endian ELF
  header and its program headers. It raises `ValueError` for a bad magic
  number or truncated data.
- `rustedos.id`: `RecycleAllocator`, `PidHandle` and `pid_alloc`.
- `rustedos.schd`: `Task`, `TaskStatus`, `TaskPos`,
  `MultilevelFeedbackQueue` and `SchdMaster`. The scheduler has two
  first-come-first-served levels above a round-robin level, and a task that
  is requeued drops one level.
- `rustedos.console`: `get_line` and `read_lines` read from a character
  source, handling DEL (backspace) and end-of-transmission.
- `rustedos.textutils`: `awk_column`, `grep_find`, `wc_count`, `echo` and
  `xargs_command`, the logic of the matching text filters.
- `rustedos.shell`: `split_background`, `split_pipeline`,
  `extract_redirects` (returns `Redirects`), `cd_target` and `prompt`. These
  parse shell command lines and raise `ShellSyntaxError` for malformed ones.

## Example

```python
from rustedos.address import PhysicalMemory, PhysPageNum, VirtPageNum
from rustedos.frame_allocator import FrameAllocator
from rustedos.page_table import PageTable, PTEFlags

memory = PhysicalMemory()
frames = FrameAllocator(PhysPageNum(0x80000), PhysPageNum(0x80400), memory)

table = PageTable(frames)
frame = frames.alloc()
table.map(VirtPageNum(0), frame.ppn, PTEFlags.R)
assert table.translate(VirtPageNum(0)) == frame.ppn
table.unmap(VirtPageNum(0))
assert table.translate(VirtPageNum(0)) is None
```

```python
from rustedos.textutils import wc_count, grep_find

print(wc_count("hello world\nbye\n"))   # (2, 3, 16)
print(grep_find("alpha\nbeta\ngamma", "a"))
```

## What it does not do

This package is a set of library pieces, not a running system:

- There is no process execution: no fork, exec, wait or context switching.
- There is no system-call layer and no file system.
- There is no command to start. The shell module only parses command lines;
  it does not run them. The text filters are plain functions with no
  executables around them.

## Running the tests

```
pip install -e .[test]
pytest
```