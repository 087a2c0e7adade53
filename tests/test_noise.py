import pytest

from voxelweek.noise import NoiseGenerator, NoiseParameters

CHUNK = 16
WATER = 64


def single_octave(amplitude=70, offset=-5, smoothness=1):
    return NoiseParameters(
        octaves=2,
        amplitude=amplitude,
        smoothness=smoothness,
        height_offset=offset,
        roughness=0.53,
    )


def make(seed, params=None):
    gen = NoiseGenerator(seed, CHUNK, WATER)
    if params is not None:
        gen.set_parameters(params)
    return gen


def test_negative_world_coordinates_give_water_level_minus_one():
    gen = make(42)
    assert gen.get_height(-1, 5, 0, 0) == WATER - 1
    assert gen.get_height(3, 2, 0, -1) == WATER - 1


def test_default_parameters():
    default = make(7)
    explicit = make(7, NoiseParameters(7, 70, 235, -5, 0.53))
    for x, z in [(0, 0), (5, 9), (300, 17)]:
        assert default.get_height(x, z, 2, 3) == explicit.get_height(x, z, 2, 3)
    assert default.parameters == NoiseParameters(7, 70, 235, -5, 0.53)


def test_deterministic_for_same_seed():
    a = make(1234)
    b = make(1234)
    heights_a = [a.get_height(x, z, 1, 1) for x in range(8) for z in range(8)]
    heights_b = [b.get_height(x, z, 1, 1) for x in range(8) for z in range(8)]
    assert heights_a == heights_b


def test_chunk_offset_equivalence():
    gen = make(99)
    assert gen.get_height(3, 4, 2, 5) == gen.get_height(3 + 2 * CHUNK, 4 + 5 * CHUNK, 0, 0)


def test_seed_shifts_sample_position():
    params = single_octave()
    shifted = make(5, params)
    base = make(0, params)
    assert shifted.get_height(0, 0, 0, 0) == base.get_height(5, 0, 0, 0)


def test_z_row_stride_is_57():
    gen = make(11, single_octave())
    assert gen.get_height(57, 0, 0, 0) == gen.get_height(0, 1, 0, 0)


def test_single_octave_heights_within_bounds():
    params = single_octave()
    gen = make(321, params)
    low = (1.2 - 1 / 2.1) * params.amplitude + params.height_offset
    high = (1.2 + 1 / 2.1) * params.amplitude + params.height_offset
    for x in range(0, 40, 3):
        for z in range(0, 40, 7):
            assert low <= gen.get_height(x, z, 0, 0) <= high


def test_no_octaves_gives_base_height():
    gen = make(3, NoiseParameters(1, 10, 235, 0, 0.53))
    assert gen.get_height(4, 4, 0, 0) == pytest.approx(12.0)


def test_non_positive_height_becomes_one():
    gen = make(3, NoiseParameters(7, 0, 235, -10, 0.53))
    assert gen.get_height(10, 10, 0, 0) == 1


def test_default_heights_are_positive():
    gen = make(2024)
    assert all(gen.get_height(x, z, 4, 4) > 0 for x in range(16) for z in range(16))