"""Unit tests for the single pass session scanner."""

import pytest
from sesx2pl.errors import SampleRateNotFoundError
from sesx2pl.sesx.scanner import scan, SessionScanner, ScannerState
from sesx2pl.sesx.models import FileReference


def test_scan_simple_session(simple_session_text):
    lines = simple_session_text.split('\n')
    result = scan(lines)

    assert result.sample_rate == 44100
    assert len(result.tracks) == 1
    track = result.tracks[0]
    assert track.name == "Music"
    assert track.clip_count == 2
    assert all(lines[i].strip().startswith('<audioClip ') for i in track.clips)
    assert result.files == [
        FileReference(path='C:\\Music\\song.mp3', id='0'),
        FileReference(path='C:\\Music\\x.mp3', id='1'),
    ]


def test_clip_counts_stop_at_next_track_header(make_session_text):
    text = make_session_text(
        tracks=[
            ('A', [{'start': 0, 'end': 1}, {'start': 1, 'end': 2}, {'start': 2, 'end': 3}]),
            ('B', [{'start': 0, 'end': 1}]),
            ('C', []),
        ],
    )
    result = scan(text.split('\n'))
    assert [t.name for t in result.tracks] == ['A', 'B', 'C']
    assert [t.clip_count for t in result.tracks] == [3, 1, 0]


def test_only_first_name_line_after_header_is_used():
    scanner = SessionScanner()
    assert scanner.state is ScannerState.NO_TRACK

    scanner.feed(0, '<session sampleRate="48000">')
    scanner.feed(1, '<name>Session Name</name>')
    assert scanner.current_track is None  # name before any track is ignored

    scanner.feed(2, '<audioTrack id="1">')
    assert scanner.state is ScannerState.AWAITING_NAME
    scanner.feed(3, '  <name>Voice</name>  ')
    assert scanner.state is ScannerState.NAMED
    scanner.feed(4, '<audioClip startPoint="0" endPoint="1">')
    scanner.feed(5, '<name>Clip metadata</name>')

    result = scanner.finish()
    assert result.tracks[0].name == "Voice"
    assert result.tracks[0].clips == [4]
    assert result.tracks[0].line == 2


def test_new_track_header_resets_name_capture():
    result = scan([
        '<session sampleRate="44100">',
        '<audioTrack id="1">',
        '<name>First</name>',
        '<audioTrack id="2">',
        '<name>Second</name>',
        '<name>Ignored</name>',
    ])
    assert [t.name for t in result.tracks] == ["First", "Second"]


def test_clip_before_any_track_is_ignored():
    result = scan([
        '<session sampleRate="44100">',
        '<audioClip startPoint="0" endPoint="1">',
        '<audioTrack id="1">',
    ])
    assert result.tracks[0].clips == []


def test_file_without_path_is_skipped_and_id_is_optional():
    result = scan([
        '<session sampleRate="44100">',
        '<file id="9" relativePath="a.wav"/>',
        '<file absolutePath="/music/b.wav"/>',
        '<file absolutePath="/music/c.wav" id="2"/>',
    ])
    assert result.files == [
        FileReference(path='/music/b.wav', id=None),
        FileReference(path='/music/c.wav', id='2'),
    ]


def test_find_file_path_first_match_wins():
    result = scan([
        '<session sampleRate="44100">',
        '<file absolutePath="/first.wav" id="1"/>',
        '<file absolutePath="/second.wav" id="1"/>',
        '<file absolutePath="/orphan.wav"/>',
    ])
    assert result.find_file_path('1') == '/first.wav'
    assert result.find_file_path('2') is None
    assert result.find_file_path(None) is None


def test_crlf_lines_are_trimmed(simple_session_text):
    result = scan(simple_session_text.replace('\n', '\r\n').split('\n'))
    assert result.tracks[0].name == "Music"
    assert result.tracks[0].clip_count == 2


@pytest.mark.parametrize("session_line", [
    '<session bitDepth="32">',
    '<session sampleRate="">',
    '<session sampleRate="0">',
    '<session sampleRate="fast">',
    '<session sampleRate="nan">',
])
def test_missing_sample_rate_is_fatal(session_line):
    with pytest.raises(SampleRateNotFoundError, match="Could not detect sample rate"):
        scan([session_line, '<audioTrack id="1">'])


def test_no_session_line_is_fatal():
    with pytest.raises(SampleRateNotFoundError):
        scan(['<audioTrack id="1">', '<name>A</name>'])
