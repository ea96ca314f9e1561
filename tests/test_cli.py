import asyncio

import main
from cvchat.db.store import DEFAULT_PROFILE


def test_load_profile_merges_over_sample(tmp_path, sample_cv):
    path = tmp_path / "jane.md"
    path.write_text(sample_cv, encoding="utf-8")

    profile = main.load_profile(path)
    assert profile["name"] == "Jane Doe"
    assert profile["memberships"] == ["IEEE", "Python Software Foundation"]
    assert profile["profile_image"].startswith("https://images.unsplash.com/")


def test_print_profile(capsys, tmp_path, sample_cv):
    path = tmp_path / "jane.md"
    path.write_text(sample_cv, encoding="utf-8")

    main.print_profile(main.load_profile(path))
    out = capsys.readouterr().out
    assert out.startswith("Jane Doe - Staff Platform Engineer")
    assert "  - Senior Engineer at Globex (2017-2021)" in out


def test_chat_loop_commands(monkeypatch, capsys):
    answers = iter(["/section skills", "/suggest", "/section nope", "/quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    asyncio.run(main.chat_loop(dict(DEFAULT_PROFILE)))
    out = capsys.readouterr().out
    assert "Focus: skills" in out
    assert "  * What are their strongest technical skills?" in out
    assert "Unknown section." in out
