import re


class FakeWorksheet:
    """
    In-memory stand-in for a gspread Worksheet, covering the calls the
    sheet writer makes: row_values, get_all_values, append_row, update
    and format.
    """

    def __init__(self, rows=None, fail_on_append=None, fail_on_read=None, stale_reads=0):
        self.rows = [list(r) for r in (rows or [])]
        self.formats = []
        self.updates = []
        self.append_calls = 0
        self.full_reads = 0
        # 1-based index of the append call that should raise
        self.fail_on_append = fail_on_append
        self.fail_on_read = fail_on_read
        # Number of emptiness checks that see a blank sheet whatever it holds
        self.stale_reads = stale_reads
        self.on_read = None

    def row_values(self, row, **kwargs):
        if self.fail_on_read:
            raise self.fail_on_read
        if self.on_read:
            self.on_read()
        if self.stale_reads:
            return []
        if row > len(self.rows):
            return []
        return list(self.rows[row - 1])

    def get_all_values(self):
        if self.fail_on_read:
            raise self.fail_on_read
        self.full_reads += 1
        if self.stale_reads:
            self.stale_reads -= 1
            return []
        return [list(r) for r in self.rows]

    def append_row(self, values, **kwargs):
        self.append_calls += 1
        if self.fail_on_append and self.append_calls == self.fail_on_append:
            raise RuntimeError("Quota exceeded")
        self.rows.append(list(values))

    def update(self, range_name=None, values=None, **kwargs):
        self.updates.append((range_name, values))
        start_row = int(re.match(r"[A-Z]+(\d+)", range_name).group(1))
        for offset, row in enumerate(values):
            index = start_row - 1 + offset
            while len(self.rows) <= index:
                self.rows.append([])
            self.rows[index] = list(row)

    def format(self, ranges, fmt):
        self.formats.append((ranges, fmt))
