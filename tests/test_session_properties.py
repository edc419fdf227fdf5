"""
End-to-end sessions against the real filesystem.
"""

import os
import pwd

import pytest


class TestSessionProperties:
    """Whole-session behaviour of the interpreter."""

    def test_cd_then_pwd(self, temp_directory, run_session, monkeypatch):
        monkeypatch.chdir(temp_directory)
        target = os.path.join(temp_directory, "subdir")

        outcome = run_session(f"cd {target}\npwd\n")

        assert outcome.exit_code == 0
        assert outcome.out == os.path.realpath(target) + "\n"
        assert outcome.err == ""

    def test_cd_relative_then_parent(self, temp_directory, run_session, monkeypatch):
        monkeypatch.chdir(temp_directory)

        outcome = run_session("cd subdir\ncd ..\npwd\n")

        assert outcome.out == os.path.realpath(temp_directory) + "\n"

    def test_cd_without_argument_goes_home(self, temp_directory, run_session, monkeypatch):
        monkeypatch.chdir(temp_directory)
        home = pwd.getpwuid(os.getuid()).pw_dir
        if not os.path.isdir(home):
            pytest.skip(f"home directory {home} does not exist")

        outcome = run_session("cd\npwd\n")

        assert outcome.out == os.path.realpath(home) + "\n"

    def test_cd_missing_directory(self, temp_directory, run_session, monkeypatch):
        monkeypatch.chdir(temp_directory)

        outcome = run_session("cd nowhere\npwd\n")

        assert outcome.err == "cd: No such file or directory\n"
        assert outcome.out == os.path.realpath(temp_directory) + "\n"

    def test_cat_reproduces_bytes(self, temp_directory, run_session, monkeypatch):
        monkeypatch.chdir(temp_directory)
        payload = bytes(range(256)) * 40 + b"tail without newline"
        with open("blob.bin", "wb") as f:
            f.write(payload)

        outcome = run_session("cat blob.bin\n")

        assert outcome.raw_out == payload
        assert outcome.err == ""

    def test_cat_missing_file(self, temp_directory, run_session, monkeypatch):
        monkeypatch.chdir(temp_directory)

        outcome = run_session("cat missing.txt\n")

        assert outcome.err == "unable to open missing.txt: No such file or directory\n"
        assert outcome.out == ""

    def test_mkdir_rmdir_round_trip(self, temp_directory, run_session, monkeypatch):
        monkeypatch.chdir(temp_directory)
        before = sorted(os.listdir(temp_directory))

        outcome = run_session("mkdir fresh\nrmdir fresh\nstat fresh\n")

        assert sorted(os.listdir(temp_directory)) == before
        assert outcome.err == "error getting stats for fresh: No such file or directory\n"

    def test_mkdir_existing(self, temp_directory, run_session, monkeypatch):
        monkeypatch.chdir(temp_directory)

        outcome = run_session("mkdir subdir\n")

        assert outcome.err == "error making directory subdir: File exists\n"

    def test_rmdir_not_empty(self, temp_directory, run_session, monkeypatch):
        monkeypatch.chdir(temp_directory)

        outcome = run_session("rmdir subdir\n")

        assert outcome.err == "error removing directory subdir: Directory not empty\n"
        assert os.path.isdir(os.path.join(temp_directory, "subdir"))

    def test_ls_tags_directories(self, tmp_path, run_session, monkeypatch):
        (tmp_path / "a").write_text("file")
        (tmp_path / "b").mkdir()
        monkeypatch.chdir(tmp_path)

        outcome = run_session("ls\n")

        lines = outcome.out.splitlines()
        assert len(lines) == 2
        assert sorted(lines) == sorted(["a".ljust(30), "b".ljust(30) + "\t<dir>"])

    def test_ls_path_keeps_working_directory(self, temp_directory, run_session, monkeypatch):
        monkeypatch.chdir(temp_directory)

        outcome = run_session("ls subdir\npwd\n")

        lines = outcome.out.splitlines()
        assert lines[0].rstrip() == "inner.md"
        assert lines[1] == os.path.realpath(temp_directory)
        assert os.getcwd() == os.path.realpath(temp_directory)

    def test_ls_missing_directory(self, temp_directory, run_session, monkeypatch):
        monkeypatch.chdir(temp_directory)

        outcome = run_session("ls nope\n")

        assert outcome.err == "could not open directory nope: No such file or directory\n"

    def test_unknown_command(self, temp_directory, run_session, monkeypatch):
        monkeypatch.chdir(temp_directory)
        before = sorted(os.listdir(temp_directory))

        outcome = run_session("foobar\n")

        assert outcome.err == "myshell: foobar: No such file or directory\n"
        assert outcome.out == ""
        assert sorted(os.listdir(temp_directory)) == before
        assert os.getcwd() == os.path.realpath(temp_directory)

    def test_rm_missing_file_keeps_session(self, temp_directory, run_session, monkeypatch):
        monkeypatch.chdir(temp_directory)

        outcome = run_session("rm missing.txt\npwd\n", show_prompt=True)

        prompt = os.path.realpath(temp_directory) + ">"
        assert outcome.err == "error unlinking file missing.txt: No such file or directory\n"
        assert outcome.out == prompt + prompt + os.path.realpath(temp_directory) + "\n" + prompt
        assert outcome.exit_code == 0

    def test_rm_removes_file(self, temp_directory, run_session, monkeypatch):
        monkeypatch.chdir(temp_directory)

        outcome = run_session("rm notes.txt\n")

        assert outcome.err == ""
        assert not os.path.exists(os.path.join(temp_directory, "notes.txt"))

    def test_stat_output(self, temp_directory, run_session, monkeypatch):
        monkeypatch.chdir(temp_directory)
        st = os.stat("notes.txt")

        outcome = run_session("stat notes.txt\n")

        lines = outcome.out.splitlines()
        assert lines[0] == "File Name: notes.txt"
        assert lines[1] == f"Total Size: {st.st_size}"
        assert lines[4] == f"Number of hardlinks: {st.st_nlink}"
        assert lines[5] == f"Inode: {st.st_ino}"

    def test_exit_ignores_rest_of_input(self, temp_directory, run_session, monkeypatch):
        monkeypatch.chdir(temp_directory)

        outcome = run_session("exit\nrm notes.txt\n")

        assert outcome.exit_code == 0
        assert os.path.exists(os.path.join(temp_directory, "notes.txt"))

    def test_pretty_ls_still_lists_every_entry(self, tmp_path, run_session, monkeypatch):
        (tmp_path / "a").write_text("file")
        (tmp_path / "b").mkdir()
        monkeypatch.chdir(tmp_path)

        outcome = run_session("ls\n", pretty=True)

        lines = sorted(line.rstrip() for line in outcome.out.splitlines())
        assert len(lines) == 2
        assert lines[0] == "a"
        assert lines[1].startswith("b ")
        assert lines[1].endswith("<dir>")
