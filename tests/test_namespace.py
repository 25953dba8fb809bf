from __future__ import annotations

from dataclasses import replace

from sshx.namespace import BANNER, list_hosts, make_ssh_config, parse_host_file, source_files
from sshx.settings import load_settings


WORK_FILE = """\
Namespace work
Host web
    HostName 10.0.0.10
    User deploy
host db
    HostName 10.0.0.11
"""


def test_namespace_prefixes_every_host_line():
    host_file = parse_host_file("work", WORK_FILE.splitlines(), ".")

    assert host_file.namespace == "work"
    assert host_file.lines == [
        "Host work.web",
        "    HostName 10.0.0.10",
        "    User deploy",
        "host work.db",
        "    HostName 10.0.0.11",
    ]


def test_file_without_namespace_is_unchanged():
    lines = ["Host plain", "    HostName example.com", "Match host foo", "    User bob"]
    host_file = parse_host_file("plain", lines, ".")

    assert host_file.namespace is None
    assert host_file.lines == lines


def test_namespace_applies_only_after_declaration_and_first_wins():
    lines = [
        "Host before",
        "Namespace first",
        "Host a",
        "Namespace second",
        "Host b",
    ]
    host_file = parse_host_file("f", lines, "::")

    assert host_file.namespace == "first"
    assert host_file.lines == ["Host before", "Host first::a", "Host first::b"]


def test_hostname_directive_is_not_rewritten():
    host_file = parse_host_file("f", ["Namespace ns", "  HostName web", "  Host web"], ".")
    assert host_file.lines == ["  HostName web", "  Host ns.web"]


def test_source_files_are_sorted_and_filtered(initialized):
    private = initialized.private_dir
    (private / "zeta").write_text("", encoding="utf-8")
    (private / "alpha").write_text("", encoding="utf-8")
    (private / ".hidden").write_text("", encoding="utf-8")
    (private / "CONFIG").write_text("", encoding="utf-8")
    (private / "subdir").mkdir()

    names = [p.name for p in source_files(initialized)]
    assert names == ["alpha", "ssh_config", "zeta"]


def test_make_ssh_config_writes_banner_and_merged_hosts(initialized):
    (initialized.private_dir / "work").write_text(WORK_FILE, encoding="utf-8")
    settings = load_settings(initialized)

    target = make_ssh_config(settings)

    assert target == initialized.ssh_config
    lines = target.read_text(encoding="utf-8").splitlines()
    assert lines[: len(BANNER)] == BANNER
    body = lines[len(BANNER):]
    assert "Host personal" in body
    assert "Host work.web" in body
    assert "host work.db" in body
    assert not any(line.startswith("Namespace") for line in body)
    # ssh_config sorts before work
    assert body.index("Host personal") < body.index("Host work.web")


def test_make_ssh_config_overwrites_previous_content(initialized):
    initialized.ssh_config.parent.mkdir(parents=True)
    initialized.ssh_config.write_text("Host stale\n", encoding="utf-8")

    make_ssh_config(load_settings(initialized))

    assert "stale" not in initialized.ssh_config.read_text(encoding="utf-8")


def test_temporary_config_inside_private_dir_is_not_merged(initialized):
    settings = load_settings(initialized)
    temporary = initialized.private_dir / "generated"
    settings = replace(settings, temporary_config_path=temporary)

    make_ssh_config(settings)
    make_ssh_config(settings)

    text = temporary.read_text(encoding="utf-8")
    assert text.count("CAUTION!") == 1
    assert not initialized.ssh_config.exists()


def test_list_hosts_skips_wildcards_and_duplicates():
    text = "\n".join(BANNER + ["Host a", "Host *", "Host b c", "Host a", "Host web-?"])
    assert list_hosts(text) == ["a", "b"]


def test_non_utf8_bytes_pass_through_unchanged(initialized):
    initialized.imported_config.write_bytes(b"# caf\xe9 server\nHost personal\n")
    (initialized.private_dir / "work").write_bytes(b"Namespace work\n# r\xe9seau\nHost web\n")

    target = make_ssh_config(load_settings(initialized))

    data = target.read_bytes()
    assert b"# caf\xe9 server\nHost personal\n" in data
    assert b"# r\xe9seau\nHost work.web\n" in data
