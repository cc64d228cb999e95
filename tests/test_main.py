import pytest

from securelink import main as cli
from securelink.settings import Settings, save_settings, load_settings


@pytest.fixture
def settings_file(tmp_path):
    return str(tmp_path / "settings.json")


def run(capsys, settings_file, *args):
    code = cli.main(["--settings-file", settings_file, *args])
    return code, capsys.readouterr().out


def _field(out, name):
    for line in out.splitlines():
        if line.strip().startswith(f"{name}:"):
            return line.split(":", 1)[1].strip()
    raise AssertionError(f"{name} not in output:\n{out}")


def test_seal_then_open(capsys, settings_file):
    code, out = run(capsys, settings_file, "seal", "example.com", "-p", "s3cret")
    assert code == 0
    assert "URL encrypted successfully!" in out
    assert "Password strength: Weak (2/5)" in out
    token = _field(out, "token")

    code, out = run(capsys, settings_file, "open", token, "-p", "s3cret", "--no-redirect")
    assert code == 0
    assert out.strip().splitlines()[-1] == "https://example.com"


def test_open_share_link(capsys, settings_file):
    _, out = run(capsys, settings_file, "--base-url", "https://x.example/", "seal", "https://a.com", "-p", "pw")
    link = _field(out, "link")
    assert link.startswith("https://x.example/?data=")
    code, out = run(capsys, settings_file, "open", link, "-p", "pw", "--no-redirect")
    assert code == 0
    assert "https://a.com" in out


def test_open_wrong_password(capsys, settings_file):
    _, out = run(capsys, settings_file, "seal", "example.com", "-p", "right")
    code, out = run(capsys, settings_file, "open", _field(out, "token"), "-p", "wrong")
    assert code == 1
    assert "Incorrect password (1 attempt)" in out


def test_open_prompts_until_correct(capsys, settings_file, monkeypatch):
    _, out = run(capsys, settings_file, "seal", "example.com", "-p", "right")
    token = _field(out, "token")
    answers = iter(["wrong", "", "also wrong", "right"])
    monkeypatch.setattr(cli.getpass, "getpass", lambda prompt="": next(answers))

    code, out = run(capsys, settings_file, "open", token, "--no-redirect")
    assert code == 0
    assert "Incorrect password (1 attempt)" in out
    assert "Please enter the password" in out
    assert "Incorrect password (2 attempts)" in out
    assert out.strip().splitlines()[-1] == "https://example.com"


def test_open_prompt_aborted(capsys, settings_file, monkeypatch):
    def eof(prompt=""):
        raise EOFError
    monkeypatch.setattr(cli.getpass, "getpass", eof)
    code, _ = run(capsys, settings_file, "open", "token")
    assert code == 1


def test_open_redirects_after_countdown(capsys, settings_file, monkeypatch):
    save_settings(Settings(auto_redirect=True, redirect_delay=2), settings_file)
    opened = []
    monkeypatch.setattr(cli.time, "sleep", lambda seconds: None)
    monkeypatch.setattr(cli.webbrowser, "open", opened.append)

    _, out = run(capsys, settings_file, "seal", "example.com", "-p", "pw")
    code, out = run(capsys, settings_file, "open", _field(out, "token"), "-p", "pw")
    assert code == 0
    assert "Redirecting in 2 seconds..." in out
    assert "Redirecting in 1 seconds..." in out
    assert opened == ["https://example.com"]


def test_redirect_cancelled(capsys, monkeypatch):
    opened = []
    monkeypatch.setattr(cli.webbrowser, "open", opened.append)

    def interrupt(seconds):
        raise KeyboardInterrupt
    monkeypatch.setattr(cli.time, "sleep", interrupt)
    cli._redirect("https://example.com", 3)
    assert "Redirect cancelled" in capsys.readouterr().out
    assert opened == []


def test_redirect_skips_non_http(monkeypatch):
    opened = []
    monkeypatch.setattr(cli.webbrowser, "open", opened.append)
    cli._redirect("javascript:alert(1)", 0)
    assert opened == []


def test_seal_invalid_url(capsys, settings_file):
    code, out = run(capsys, settings_file, "seal", "not a url", "-p", "pw")
    assert code == 1
    assert "Please enter a valid URL" in out


def test_seal_with_generated_password(capsys, settings_file):
    code, out = run(capsys, settings_file, "seal", "example.com", "--generate")
    assert code == 0
    password = _field(out, "Generated password")
    assert len(password) == 16
    assert "Password strength: Strong (5/5)" in out
    code, out = run(capsys, settings_file, "open", _field(out, "token"), "-p", password, "--no-redirect")
    assert code == 0


def test_seal_password_and_generate_are_exclusive(settings_file):
    with pytest.raises(SystemExit):
        cli.main(["--settings-file", settings_file, "seal", "example.com", "-p", "pw", "--generate"])


def test_seal_hides_strength_when_disabled(capsys, settings_file):
    save_settings(Settings(show_password_strength=False), settings_file)
    _, out = run(capsys, settings_file, "seal", "example.com", "-p", "pw")
    assert "Password strength" not in out


def test_bulk_from_file(capsys, settings_file, tmp_path):
    urls = tmp_path / "urls.txt"
    urls.write_text("example.com\nnot a url\nhttp://b.org\n", encoding="utf-8")
    code, out = run(capsys, settings_file, "bulk", str(urls), "-p", "pw")
    assert code == 0
    assert "2 URLs encrypted successfully!" in out


def test_scan_text(capsys, settings_file):
    code, out = run(capsys, settings_file, "scan", "visit http://a.com and b.org today")
    assert code == 0
    assert out.splitlines() == ["[+] Found 2 URLs", "http://a.com", "https://b.org"]


def test_scan_and_encrypt(capsys, settings_file):
    code, out = run(capsys, settings_file, "scan", "a.com", "--encrypt", "-p", "pw")
    assert code == 0
    assert "URL encrypted successfully!" in out


def test_scan_nothing(capsys, settings_file):
    code, out = run(capsys, settings_file, "scan", "nothing")
    assert code == 1
    assert "No URLs found" in out


def test_generate(capsys, settings_file):
    code, out = run(capsys, settings_file, "generate")
    assert code == 0
    assert len(out.strip()) == 16
    code, out = run(capsys, settings_file, "generate", "--length", "2")
    assert code == 1


def test_strength(capsys, settings_file):
    code, out = run(capsys, settings_file, "strength", "Abc123!@")
    assert code == 0
    assert "Password strength: Strong (5/5)" in out
    assert "[x] special" in out


def test_settings_update(capsys, settings_file):
    code, out = run(capsys, settings_file, "settings", "--auto-redirect", "off", "--redirect-delay", "50")
    assert code == 0
    assert "Settings saved" in out
    assert "redirect_delay = 10" in out
    assert load_settings(settings_file) == Settings(auto_redirect=False, redirect_delay=10)


def test_settings_unwritable_file(capsys, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    code, out = run(capsys, str(blocker / "settings.json"), "settings", "--redirect-delay", "5")
    assert code == 1
    assert out.startswith("[!] Cannot save settings")
    assert "Settings saved" not in out


def test_settings_rejects_bad_switch(settings_file):
    with pytest.raises(SystemExit):
        cli.main(["--settings-file", settings_file, "settings", "--auto-redirect", "maybe"])


def test_sha1_tokens(capsys, settings_file):
    _, out = run(capsys, settings_file, "--hash", "sha1", "seal", "example.com", "-p", "pw")
    token = _field(out, "token")
    code, _ = run(capsys, settings_file, "open", token, "-p", "pw", "--no-redirect")
    assert code == 1
    code, _ = run(capsys, settings_file, "--hash", "sha1", "open", token, "-p", "pw", "--no-redirect")
    assert code == 0
