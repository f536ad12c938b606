import pytest

from VirtualMemory import main


@pytest.fixture
def trace_file(tmp_path):
    path = tmp_path / 'addresses.trace'
    path.write_text('00000000 R\n00001000 W\n00000abc R\n')
    return str(path)


def test_lru_run_prints_translations_and_report(trace_file, capsys):
    assert main([trace_file, '0']) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        'Logical address: 0x00000000 -> Physical address: 0x00000000',
        'Logical address: 0x00001000 -> Physical address: 0x00001000',
        'Logical address: 0x00000ABC -> Physical address: 0x00000ABC',
        '',
        'Method used: LRU',
        'Page Faults: 2',
        'TLB Hits: 1',
        'TLB Misses: 2',
    ]


def test_second_chance_run(trace_file, capsys):
    assert main([trace_file, '1']) == 0
    assert 'Method used: Second Chance' in capsys.readouterr().out


@pytest.mark.parametrize('argv', [[], ['only.trace'], ['a.trace', '0', 'extra'], ['a.trace', '2'],
                                  ['a.trace', 'lru']])
def test_usage_errors(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code != 0
    assert 'usage' in capsys.readouterr().err


def test_missing_trace_file_reports_error_without_statistics(tmp_path, capsys):
    assert main([str(tmp_path / 'missing.trace'), '0']) == 1
    captured = capsys.readouterr()
    assert 'Error opening trace file' in captured.err
    assert captured.out == ''


def test_malformed_record_ends_the_run(tmp_path, capsys):
    path = tmp_path / 'broken.trace'
    path.write_text('00000000 R\n00001000\n00002000 R\n')
    assert main([str(path), '0']) == 0
    out = capsys.readouterr().out
    assert out.count('Logical address') == 1
    assert 'Page Faults: 1' in out
    assert 'TLB Misses: 1' in out


def test_undecodable_trace_still_reports_statistics(tmp_path, capsys):
    path = tmp_path / 'binary.trace'
    path.write_bytes(b'00000000 R\n\xff\xfe R\n00001000 R\n')
    assert main([str(path), '1']) == 0
    out = capsys.readouterr().out
    assert out.count('Logical address') == 1
    assert 'Page Faults: 1' in out
