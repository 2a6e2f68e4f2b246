"""Directory listings drawn in the style of the tree command."""

import re
from dataclasses import dataclass, field

_UNLIMITED_DEPTH = 666
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_BRANCH = "|-- "
_LAST_BRANCH = "`-- "
_CONTINUE = "|   "
_BLANK = "    "


@dataclass
class _Options:
    show_hidden: bool = False
    only_directories: bool = False
    max_depth: int = _UNLIMITED_DEPTH


def _parse_flags(flags):
    options = _Options()
    for flag in flags.split(","):
        if "-a" in flag:
            options.show_hidden = True
        elif "-d" in flag:
            options.only_directories = True
        elif "-L" in flag and len(flag) > 2:
            match = _LEADING_INT.match(flag[2:])
            if match is None:
                raise ValueError(f"bad depth flag {flag!r}")
            options.max_depth = int(match.group(1))
    return options


def _sort_key(name):
    if name.startswith("."):
        name = name[1:]
    return name.lower()


@dataclass
class _Node:
    name: str = ""
    is_dir: bool = True
    children: dict = field(default_factory=dict)

    def add(self, path, only_directories):
        head, slash, rest = path.partition("/")
        if slash:
            child = self.children.setdefault(_sort_key(head), _Node())
            child.add(rest, only_directories)
            if not child.name:
                child.name = head
        elif not only_directories:
            child = self.children.setdefault(_sort_key(path), _Node())
            child.name = path
            child.is_dir = False

    def render(self, lines, prefix, depth, max_depth):
        dirs, files = (1, 0) if self.is_dir else (0, 1)
        if depth < max_depth:
            entries = sorted(self.children.items(), key=lambda item: item[0])
            for position, (_, child) in enumerate(entries, start=1):
                last = position == len(entries)
                lines.append(prefix + (_LAST_BRANCH if last else _BRANCH) + child.name)
                child_dirs, child_files = child.render(
                    lines, prefix + (_BLANK if last else _CONTINUE), depth + 1, max_depth
                )
                dirs += child_dirs
                files += child_files
        return dirs, files


def tree_listing(root, flags, paths):
    """Lines of the tree listing of root, built from the given file paths."""
    options = _parse_flags(flags)
    prefix = ("" if root.startswith(".") else "./") + root + "/"

    tree = None
    for path in paths:
        if not path.startswith(prefix):
            continue
        relative = path[len(prefix) - 1:]
        if not options.show_hidden and "/." in relative:
            continue
        if tree is None:
            tree = _Node()
        tree.add(relative[1:], options.only_directories)

    if tree is None:
        lines = [f"{root} [error opening dir]"]
        dirs, files = 1, 0
    else:
        lines = [root]
        dirs, files = tree.render(lines, "", 0, options.max_depth)

    summary = f"{dirs - 1} director{'y' if dirs == 2 else 'ies'}"
    if not options.only_directories:
        summary += f", {files} {'file' if files == 1 else 'files'}"
    lines.append("")
    lines.append(summary)
    return lines