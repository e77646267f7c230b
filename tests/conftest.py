"""
Pytest configuration and fixtures
"""
import pytest

from gradetrack.report import C
from gradetrack.roster import Roster


@pytest.fixture(autouse=True)
def no_color():
    """Keep ANSI codes out of formatted output"""
    C.disable()


@pytest.fixture
def roster():
    """Empty roster"""
    return Roster()


@pytest.fixture
def graded_roster():
    """Roster with Ann: [90, 80], Bo: [70] and an ungraded Cy"""
    r = Roster()
    for name in ("Ann", "Bo", "Cy"):
        r.add_student(name)
    r.add_grade(r.find_by_name("Ann"), 90)
    r.add_grade(r.find_by_name("Ann"), 80)
    r.add_grade(r.find_by_name("Bo"), 70)
    return r


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep a real ~/.config/gradetrack/gradetrack.toml out of the tests"""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home
