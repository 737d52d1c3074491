import pytest

from pkmsave.save.constants import GEN1_LAYOUT

from savebuilder import gen1_save, gen1_text, put_creature


@pytest.fixture(autouse=True)
def config_path(tmp_path, monkeypatch):
    """Keep every test away from the real user config."""
    path = tmp_path / "config" / "config.toml"
    monkeypatch.setattr("pkmsave.profiles.get_config_path", lambda: path)
    return path


@pytest.fixture
def red_save() -> bytes:
    """Gen 1 save: trainer RED, $3000, one level-10 Pikachu with no nickname."""
    buf = gen1_save(name="RED", money=b"\x00\x03\x00", badges=0b00000011,
                    playtime=(1, 2, 5), party_count=1)
    put_creature(buf, GEN1_LAYOUT, 0, species=25, level=10, hp=(30, 35),
                 stats=(20, 15, 25, 18, 0), moves=(33, 45, 0, 200), pp=(35, 40, 0, 0))
    return bytes(buf)


@pytest.fixture
def red_save_nicknamed() -> bytes:
    buf = gen1_save(party_count=2)
    put_creature(buf, GEN1_LAYOUT, 0, species=4, level=12, nickname=gen1_text("Char"))
    put_creature(buf, GEN1_LAYOUT, 1, species=150, level=70)
    return bytes(buf)
