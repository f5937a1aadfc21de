from collections.abc import Sequence


class ListView(Sequence):
    """
    A read-only view of a list. Changes to the list show through the view,
    but the view can't be used to change the list.
    """

    def __init__(self, items):
        self._items = items

    def __getitem__(self, idx):
        return self._items[idx]

    def __len__(self):
        return len(self._items)

    def __eq__(self, other):
        if isinstance(other, ListView):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    def __repr__(self):
        return "ListView(%r)" % (self._items,)


def pprinttable(rows, out=None):
    """
    Pretty Print a table of collections.namedtuples

    @param rows A list of named tuples
    @param out  File to print to, defaults to stdout
    """
    headers = rows[0]._fields
    lens = []
    for i in range(len(rows[0])):
        lens.append(
            len(max([str(x[i]) for x in rows] + [headers[i]], key=len))
        )

    pattern = " | ".join(["%%-%ds" % n for n in lens])
    separator = "-+-".join(["-" * n for n in lens])

    print(pattern % tuple(headers), file=out)
    print(separator, file=out)
    for line in rows:
        print(pattern % tuple(str(t) for t in line), file=out)
