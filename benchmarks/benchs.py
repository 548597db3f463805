"""Benchmarks for pynub package - benchs.py.

Each category runs the same operation on the specialized container, the generic `RefSlice` and a plain `list`.
"""

import pynub as nb

from ._registery import bench


def _dupes(size: range) -> list[int]:
    return [x % 64 for x in size]


class Append:
    """Build a container one element at a time."""

    @bench()
    @staticmethod
    def int_slice(data: list[int]) -> object:
        """Append to an `IntSlice`."""
        result = nb.IntSlice()
        for x in data:
            result.append(x)
        return result

    @bench()
    @staticmethod
    def ref_slice(data: list[int]) -> object:
        """Append to a `RefSlice`."""
        result = nb.RefSlice[int]()
        for x in data:
            result.append(x)
        return result

    @bench()
    @staticmethod
    def plain_list(data: list[int]) -> object:
        """Append to a `list`."""
        result: list[int] = []
        for x in data:
            result.append(x)  # noqa: PERF402
        return result


class Uniq:
    """Remove duplicates keeping first-seen order."""

    @bench(gen=lambda size: nb.IntSlice(_dupes(size)))
    @staticmethod
    def int_slice(data: nb.IntSlice) -> object:
        """Uniq an `IntSlice`."""
        return data.uniq()

    @bench(gen=lambda size: nb.RefSlice(_dupes(size)))
    @staticmethod
    def ref_slice(data: nb.RefSlice[int]) -> object:
        """Uniq a `RefSlice`."""
        return data.uniq()

    @bench(gen=_dupes)
    @staticmethod
    def plain_list(data: list[int]) -> object:
        """Uniq a `list` through a dict."""
        return list(dict.fromkeys(data))


class Drop:
    """Remove elements from both ends until empty."""

    @bench(gen=nb.IntSlice)
    @staticmethod
    def int_slice(data: nb.IntSlice) -> object:
        """Alternate `drop_first` and `drop_last` on an `IntSlice`."""
        while data.any():
            data.drop_first().drop_last()
        return data

    @bench(gen=nb.RefSlice)
    @staticmethod
    def ref_slice(data: nb.RefSlice[int]) -> object:
        """Alternate `drop_first` and `drop_last` on a `RefSlice`."""
        while data.any():
            data.drop_first().drop_last()
        return data

    @bench(gen=list)
    @staticmethod
    def plain_list(data: list[int]) -> object:
        """Alternate `del` at both ends of a `list`."""
        while data:
            del data[0]
            if data:
                del data[-1]
        return data


class Sort:
    """Sort in descending order into a new container."""

    @bench(gen=lambda size: nb.StrSlice(str(x) for x in size))
    @staticmethod
    def str_slice(data: nb.StrSlice) -> object:
        """Sort a `StrSlice` of digits."""
        return data.sort_descending()

    @bench(gen=lambda size: nb.RefSlice(str(x) for x in size))
    @staticmethod
    def ref_slice(data: nb.RefSlice[str]) -> object:
        """Sort a `RefSlice` of digits."""
        return data.sort_descending()

    @bench(gen=lambda size: [str(x) for x in size])
    @staticmethod
    def plain_list(data: list[str]) -> object:
        """Sort a `list` of digits."""
        return sorted(data, reverse=True)
