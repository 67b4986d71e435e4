from workforce_metrics.core.enums import Severity
from workforce_metrics.performance.export import ReportExporter, to_delimited_text


class RecordingNotifier:
    def __init__(self):
        self.sent = []

    def notify(self, notification) -> None:
        self.sent.append(notification)


class MemorySink:
    def __init__(self):
        self.files = {}

    def __call__(self, payload: str, filename: str) -> None:
        self.files[filename] = payload


def test_only_fields_with_the_delimiter_are_quoted():
    assert to_delimited_text([{"name": "A,B", "points": 5}]) == 'name,points\n"A,B",5'


def test_header_follows_first_row_keys():
    rows = [{"a": 1, "b": None}, {"b": True, "a": 2.0}]
    assert to_delimited_text(rows) == "a,b\n1,\n2,true"


def test_no_rows_no_text():
    assert to_delimited_text([]) == ""


def test_alternate_delimiter():
    assert to_delimited_text([{"x": "a;b", "y": "c,d"}], delimiter=";") == 'x;y\n"a;b";c,d'


def test_export_writes_and_announces():
    notifier = RecordingNotifier()
    sink = MemorySink()

    payload = ReportExporter(notifier).export([{"name": "Alice", "score": 1.5}], "user-performance-report", sink)

    assert payload == "name,score\nAlice,1.5"
    assert sink.files == {"user-performance-report.csv": payload}
    assert [(n.title, n.description, n.severity) for n in notifier.sent] == [
        ("Export Complete", "Data exported to user-performance-report.csv", Severity.SUCCESS)
    ]


def test_empty_export_is_rejected_without_writing():
    notifier = RecordingNotifier()
    sink = MemorySink()

    assert ReportExporter(notifier).export([], "empty-export", sink) is None
    assert sink.files == {}
    assert [(n.title, n.description, n.severity) for n in notifier.sent] == [
        ("No Data", "No data to export", Severity.DANGER)
    ]
