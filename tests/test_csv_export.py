import csv
import io

from cmdbench.csv_export import CsvExporter
from cmdbench.markup import BenchmarkResult


def _results():
    return [
        BenchmarkResult(
            command="FOO=one BAR=two command | 1",
            command_with_unused_parameters="FOO=one BAR=two command | 1",
            mean=1.0,
            stddev=2.0,
            median=1.0,
            user=3.0,
            system=4.0,
            min=5.0,
            max=6.0,
            times=[7.0, 8.0, 9.0],
            exit_codes=[0, 0, 0],
            parameters={"foo": "one", "bar": "two"},
        ),
        BenchmarkResult(
            command="FOO=one BAR=seven command | 2",
            command_with_unused_parameters="FOO=one BAR=seven command | 2",
            mean=11.0,
            stddev=12.0,
            median=11.0,
            user=13.0,
            system=14.0,
            min=15.0,
            max=16.5,
            times=[17.0, 18.0, 19.0],
            exit_codes=[0, 0, 0],
            parameters={"foo": "one", "bar": "seven"},
        ),
    ]


def test_csv():
    expected = (
        "command,mean,stddev,median,user,system,min,max,parameter_bar,parameter_foo\n"
        "FOO=one BAR=two command | 1,1,2,1,3,4,5,6,two,one\n"
        "FOO=one BAR=seven command | 2,11,12,11,13,14,15,16.5,seven,one\n"
    )
    assert CsvExporter().serialize(_results()).decode("utf-8") == expected


def test_csv_empty_results():
    assert CsvExporter().serialize([]) == b"command,mean,stddev,median,user,system,min,max\n"


def test_csv_missing_stddev_and_quoting():
    result = BenchmarkResult(
        command="echo a,b",
        command_with_unused_parameters="echo a,b",
        mean=0.25,
        stddev=None,
        median=0.25,
        user=0.125,
        system=0.5,
        min=0.1,
        max=0.4,
    )
    text = CsvExporter().serialize([result]).decode("utf-8")
    rows = list(csv.reader(io.StringIO(text)))
    assert rows[1] == ["echo a,b", "0.25", "0", "0.25", "0.125", "0.5", "0.1", "0.4"]