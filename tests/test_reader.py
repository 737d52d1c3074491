import pytest

from pkmsave.save.constants import GEN1_LAYOUT, GEN2_LAYOUT
from pkmsave.save.detect import Generation
from pkmsave.save.models import DecodeStatus, SaveFormatError
from pkmsave.save.reader import decode_file, decode_gen1, decode_gen2, decode_gen3, decode_save

from savebuilder import gen1_save, gen1_text, gen2_save, gen2_text, put, put_creature


class TestGen1:
    def test_round_trip(self, red_save):
        result = decode_gen1(red_save)
        assert result.status is DecodeStatus.DECODED
        rec = result.unwrap()
        assert rec.name == "RED"
        assert rec.money == 3000
        assert rec.party_count == 1
        assert rec.party[0].species_id == 25
        assert rec.party[0].level == 10
        assert rec.generation is Generation.GEN1

    def test_trainer_fields(self, red_save):
        rec = decode_gen1(red_save).unwrap()
        assert rec.badges == 0b11
        assert rec.badge_count == 2
        assert rec.play_time == 3600 + 2 * 60 + 5
        assert rec.play_time_formatted == "1:02:05"

    def test_creature_fields(self, red_save):
        mon = decode_gen1(red_save).unwrap().party[0]
        assert (mon.current_hp, mon.max_hp) == (30, 35)
        assert (mon.attack, mon.defense, mon.speed) == (20, 15, 25)
        assert mon.moves == ("Tackle", "Growl", "None", "???")
        assert mon.move_pp == (35, 40, 0, 0)

    def test_move_max_pp(self, red_save):
        mon = decode_gen1(red_save).unwrap().party[0]
        # Tackle, Growl, empty slot, id 200 has no table entry
        assert mon.move_max_pp == (35, 40, 0, None)
        assert mon.known_moves() == [("Tackle", 35, 35), ("Growl", 40, 40), ("???", 0, None)]

    def test_special_is_duplicated(self, red_save):
        mon = decode_gen1(red_save).unwrap().party[0]
        assert mon.special_attack == 18
        assert mon.special_defense == mon.special_attack

    def test_nickname_fallback(self, red_save, red_save_nicknamed):
        assert decode_gen1(red_save).unwrap().party[0].nickname == "Pikachu"
        party = decode_gen1(red_save_nicknamed).unwrap().party
        assert party[0].nickname == "Char"
        # species with no table entry
        assert party[1].nickname == "???"

    def test_party_count_is_clamped(self):
        buf = gen1_save(party_count=200)
        for i in range(6):
            put_creature(buf, GEN1_LAYOUT, i, species=i + 1, level=5)
        rec = decode_gen1(bytes(buf)).unwrap()
        assert rec.party_count == 6
        assert [m.species_id for m in rec.party] == [1, 2, 3, 4, 5, 6]

    def test_name_is_limited(self):
        buf = gen1_save()
        put(buf, GEN1_LAYOUT.player_name, gen1_text("ABCDEFGHIJKL"))
        assert decode_gen1(bytes(buf)).unwrap().name == "ABCDEFGHI"

    def test_rival_and_pokedex(self):
        buf = gen1_save()
        put(buf, 0x25F6, gen1_text("BLUE"))
        put(buf, 0x25A3, b"\x07\x01")      # 4 owned
        put(buf, 0x25B6, b"\xff\x0f")      # 12 seen
        rec = decode_gen1(bytes(buf)).unwrap()
        assert rec.rival_name == "BLUE"
        assert (rec.pokedex_owned, rec.pokedex_seen) == (4, 12)

    def test_deterministic(self, red_save):
        assert decode_gen1(red_save) == decode_gen1(red_save)

    def test_size_mismatch(self):
        result = decode_gen1(bytes(32767))
        assert result.status is DecodeStatus.SIZE_MISMATCH
        assert result.record is None
        assert not result.ok
        with pytest.raises(SaveFormatError):
            result.unwrap()


class TestGen2:
    def make_save(self) -> bytes:
        buf = gen2_save(name="GOLD", money=b"\x00\x05\x00", badges=0x0103,
                        playtime=(10, 0, 59), party_count=2)
        put_creature(buf, GEN2_LAYOUT, 0, species=155, level=14, hp=(40, 41),
                     stats=(22, 19, 27, 24, 21), moves=(33, 43, 52, 0), pp=(35, 30, 25, 0),
                     nickname=gen2_text("Blaze"))
        put_creature(buf, GEN2_LAYOUT, 1, species=16, level=7)
        return bytes(buf)

    def test_trainer_fields(self):
        rec = decode_gen2(self.make_save()).unwrap()
        assert rec.generation is Generation.GEN2
        assert rec.name == "GOLD"
        assert rec.money == 5000
        assert rec.badges == 0x0103
        assert rec.badge_count == 3
        assert rec.play_time_formatted == "10:00:59"
        assert rec.rival_name is None
        assert rec.pokedex_owned is None

    def test_creatures(self):
        first, second = decode_gen2(self.make_save()).unwrap().party
        assert first.species_id == 155
        assert first.nickname == "Blaze"
        assert first.level == 14
        assert (first.special_attack, first.special_defense) == (24, 21)
        assert first.moves == ("Tackle", "Leer", "Ember", "None")
        assert second.nickname == "Pidgey"
        assert second.level == 7

    def test_move_max_pp(self):
        first = decode_gen2(self.make_save()).unwrap().party[0]
        assert first.move_max_pp == (35, 30, 25, 0)

    def test_party_count_is_clamped(self):
        buf = gen2_save(party_count=200)
        for i in range(6):
            put_creature(buf, GEN2_LAYOUT, i, species=i + 1, level=5)
        rec = decode_gen2(bytes(buf)).unwrap()
        assert rec.party_count == 6
        assert [m.species_id for m in rec.party] == [1, 2, 3, 4, 5, 6]

    def test_deterministic(self):
        data = self.make_save()
        assert decode_gen2(data).record == decode_gen2(data).record

    def test_size_mismatch(self):
        assert decode_gen2(bytes(32768)).status is DecodeStatus.SIZE_MISMATCH


class TestDispatch:
    def test_dispatches_by_size(self, red_save):
        assert decode_save(red_save).generation is Generation.GEN1
        assert decode_save(bytes(gen2_save())).generation is Generation.GEN2
        assert decode_save(bytes(131072)).generation is Generation.GEN3

    def test_unknown_size(self):
        result = decode_save(bytes(1000))
        assert result.status is DecodeStatus.UNKNOWN_GENERATION
        assert result.record is None
        with pytest.raises(SaveFormatError) as exc:
            result.unwrap()
        assert exc.value.status is DecodeStatus.UNKNOWN_GENERATION

    def test_decode_file(self, tmp_path, red_save):
        path = tmp_path / "red.sav"
        path.write_bytes(red_save)
        assert decode_file(path).unwrap().name == "RED"

    def test_gen3_size_mismatch(self):
        assert decode_gen3(bytes(65536)).status is DecodeStatus.SIZE_MISMATCH

    def test_results_are_hashable(self, red_save):
        fabricated = decode_gen3(bytes(131072))
        assert isinstance(fabricated.warnings, tuple)
        assert hash(fabricated) == hash(decode_gen3(bytes(131072)))
        assert hash(decode_save(red_save)) == hash(decode_save(red_save))
