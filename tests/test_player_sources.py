from playerkit.core.player import SourceDescriptor, describe_sources, matches, resolve_sources

from conftest import NOW


def test_describe_classifies_id_filename_and_url(audio):
    out = describe_sources("7, song.MP3,https://www.example.org/a.flac", audio.patterns)
    assert [(d.identifier, d.kind) for d in out] == [
        ("7", "id"),
        ("song.MP3", "filename"),
        ("https://www.example.org/a.flac", "url"),
    ]


def test_describe_skips_unrecognized_references(audio):
    out = describe_sources("notes.txt, http://x/a.mp3", audio.patterns)
    assert [d.kind for d in out] == ["url"]


def test_matches_requires_every_reference(audio):
    assert matches("a.mp3, http://x/b.ogg", audio.patterns)
    assert not matches("a.mp3, clip.mp4", audio.patterns)
    assert not matches("", audio.patterns)


def test_resolve_preserves_input_order(file_store):
    descriptors = [
        SourceDescriptor(identifier="http://x/a.mp3", kind="url"),
        SourceDescriptor(identifier="7", kind="id"),
    ]
    out = resolve_sources(
        descriptors,
        file_lookup=file_store.find,
        url_from_file=file_store.download_url,
        now=lambda: NOW,
    )
    assert out == ["http://x/a.mp3", "https://example.com/file_download/7/b.ogg"]


def test_resolve_by_filename(file_store):
    out = resolve_sources(
        [SourceDescriptor(identifier="track.mp3", kind="filename")],
        file_lookup=file_store.find,
        url_from_file=file_store.download_url,
        now=lambda: NOW,
    )
    assert out == ["https://example.com/file_download/8/track.mp3"]


def test_lookup_miss_skips_only_that_entry(file_store, caplog):
    descriptors = [
        SourceDescriptor(identifier="404", kind="id"),
        SourceDescriptor(identifier="missing.mp3", kind="filename"),
        SourceDescriptor(identifier="http://x/a.mp3", kind="url"),
    ]
    out = resolve_sources(
        descriptors,
        file_lookup=file_store.find,
        url_from_file=file_store.download_url,
        now=lambda: NOW,
    )
    assert out == ["http://x/a.mp3"]


def test_files_created_after_cutoff_are_invisible(file_store):
    out = resolve_sources(
        [SourceDescriptor(identifier="9", kind="id")],
        file_lookup=file_store.find,
        url_from_file=file_store.download_url,
        now=lambda: NOW,
    )
    assert out == []


def test_non_ascii_digits_are_not_ids(audio, file_store):
    assert not matches("²", audio.patterns)

    out = resolve_sources(
        describe_sources("², http://x/a.mp3", audio.patterns),
        file_lookup=file_store.find,
        url_from_file=file_store.download_url,
        now=lambda: NOW,
    )
    assert out == ["http://x/a.mp3"]
