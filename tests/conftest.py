"""Pytest fixtures for test configuration and synthetic sesx sessions.

Sessions are written the way Audition lays them out: one element per line,
tracks before the file table, a `<name>` line inside the session header
that must not be taken for a track name.
"""
import pytest
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple


def _clip_line(clip: Dict[str, Any], clip_id: int) -> str:
    attrs = [
        'clipAutoCrossfade="true"',
        'crossFadeHeadClipID="-1"',
        'crossFadeTailClipID="-1"',
    ]
    if 'end' in clip:
        attrs.append(f'endPoint="{clip["end"]}"')
    if 'file_id' in clip:
        attrs.append(f'fileID="{clip["file_id"]}"')
    attrs.append('hue="-1"')
    attrs.append(f'id="{clip_id}"')
    attrs.append('lockedInTime="false"')
    if clip.get('name') is not None:
        attrs.append(f'name="{clip["name"]}"')
    attrs.append('sourceInPoint="0"')
    if 'start' in clip:
        attrs.append(f'startPoint="{clip["start"]}"')
    attrs.append('zOrder="0"')
    return f'        <audioClip {" ".join(attrs)}>'


def build_session_text(
    tracks: Sequence[Tuple[str, List[Dict[str, Any]]]],
    files: Sequence[Tuple[str, str]] = (),
    sample_rate: int | str | None = 44100,
    newline: str = '\n',
) -> str:
    """Return sesx text for ``tracks`` = [(track name, [clip dicts])].

    Clip dicts use keys start, end, file_id and name; omitted keys are
    left out of the line. ``files`` is [(id, absolutePath)].
    """
    rate_attr = f' sampleRate="{sample_rate}"' if sample_rate is not None else ''
    lines = [
        '<?xml version="1.0" encoding="UTF-8" standalone="no" ?>',
        '<!DOCTYPE sesx>',
        '<sesx version="1.9">',
        f'  <session appBuild="13.0.0.519" audioChannelType="stereo" bitDepth="32" duration="5292000"{rate_attr}>',
        '    <name>Mix.sesx</name>',
        '    <tracks>',
    ]
    clip_id = 0
    for index, (name, clips) in enumerate(tracks):
        lines.append(f'      <audioTrack automationLaneOpenState="false" id="{10001 + index}" index="{index + 1}" select="false" visible="true">')
        lines.append('        <trackParameters trackHeight="134" trackHue="-1" trackMinimized="false">')
        lines.append(f'          <name>{name}</name>')
        lines.append('        </trackParameters>')
        for clip in clips:
            lines.append(_clip_line(clip, clip_id))
            lines.append(f'          <name>clip {clip_id} metadata</name>')
            lines.append('        </audioClip>')
            clip_id += 1
        lines.append('      </audioTrack>')
    lines.append('    </tracks>')
    lines.append('  </session>')
    lines.append('  <files>')
    for file_id, path in files:
        lines.append(f'    <file absolutePath="{path}" id="{file_id}" mediaHandler="AmioMp3" relativePath="x.mp3"/>')
    lines.append('  </files>')
    lines.append('</sesx>')
    return newline.join(lines) + newline


@pytest.fixture
def simple_session_text() -> str:
    """One track, two clips at 44.1 kHz (0-1 s "Art - Song", 2-3 s "X")."""
    return build_session_text(
        tracks=[('Music', [
            {'start': 0, 'end': 44100, 'file_id': '0', 'name': 'Art - Song'},
            {'start': 88200, 'end': 132300, 'file_id': '1', 'name': 'X'},
        ])],
        files=[('0', 'C:\\Music\\song.mp3'), ('1', 'C:\\Music\\x.mp3')],
    )


@pytest.fixture
def simple_session(tmp_path: Path, simple_session_text: str) -> Path:
    path = tmp_path / 'mix.sesx'
    path.write_text(simple_session_text, encoding='utf-8')
    return path


@pytest.fixture
def make_session_text():
    """Expose build_session_text to tests."""
    return build_session_text


@pytest.fixture
def session_factory(tmp_path: Path):
    """Write a session built by build_session_text and return its path."""
    def _make(*args, filename: str = 'session.sesx', **kwargs) -> Path:
        path = tmp_path / filename
        path.write_text(build_session_text(*args, **kwargs), encoding='utf-8', newline='')
        return path
    return _make


@pytest.fixture
def test_config(tmp_path: Path) -> Dict[str, Any]:
    """Provide a minimal test configuration as a dict.

    Tests pass it to the CLI as ``obj`` instead of relying on .env files or
    environment variables.
    """
    return {
        'log_level': 'DEBUG',
        'convert': {
            'tracks': '0',
            'delta': 0.0,
            'encoding': 'utf-8-sig',
        },
        'cue': {
            'performer': 'sesx2pl',
            'title': 'Playlist',
            'placeholder_source': 'INSERT-FILENAME-TO-SOURCE.mp3',
        },
        'export': {
            'encoding': 'utf-8',
            'fail_on_write_error': False,
        },
    }
