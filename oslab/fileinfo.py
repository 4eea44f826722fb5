"""Show inode, size, permissions, owner and times of a file."""

from __future__ import annotations

import os
import stat
import sys
import time

_BITS = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)


def permission_string(mode: int) -> str:
    """Return a ten-character string such as ``drwxr-xr-x`` for a mode."""
    kind = "d" if stat.S_ISDIR(mode) else "-"
    return kind + "".join(char if mode & bit else "-" for bit, char in _BITS)


def _octal(value: int) -> str:
    return f"0{value:o}" if value else "0"


def describe(path) -> str:
    """Return the attribute report for ``path``; raises OSError if it cannot be stat'ed."""
    info = os.stat(path)
    lines = [
        f"a. Inode: {info.st_ino}",
        f"b. Size (in bytes): {info.st_size} bytes",
        f"c. Blocks: {getattr(info, 'st_blocks', 0)}",
        f"d. File Permissions: {_octal(info.st_mode & 0o777)}/{permission_string(info.st_mode)}",
        f"e. Uid: {info.st_uid}",
        f"f. Time of last access: {time.ctime(info.st_atime)}",
        f"g. Time of data modification: {time.ctime(info.st_mtime)}",
        f"h. Last status change time: {time.ctime(info.st_ctime)}",
    ]
    return "\n".join(lines) + "\n"


def main(argv=None) -> int:
    """Print the attribute report for the single path argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: fileinfo <pathname>", file=sys.stderr)
        return 1
    try:
        report = describe(args[0])
    except OSError as exc:
        print(f"stat: {exc.strerror or exc}", file=sys.stderr)
        return 1
    sys.stdout.write(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())