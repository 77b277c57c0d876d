import pytest

from bspcsg.__main__ import main
from bspcsg.geom import point
from bspcsg.geometry_utils import solid_volume
from bspcsg.io import read_stl, write_stl
from bspcsg.primitives import cube


@pytest.fixture
def unit_cube_stl(tmp_path):
    path = tmp_path / 'cube.stl'
    write_stl(cube(1.0, center=point(0.5, 0.5, 0.5)), path)
    return path


def test_union_with_translation(tmp_path, unit_cube_stl, capsys):
    out = tmp_path / 'union.stl'
    status = main(['union', str(unit_cube_stl), str(unit_cube_stl),
                   '-o', str(out), '--translate-b', '0.5', '0', '0'])
    assert status == 0
    assert solid_volume(read_stl(out)) == pytest.approx(1.5, rel=1e-5)
    assert 'volume 1.5' in capsys.readouterr().out


def test_intersect_ascii(tmp_path, unit_cube_stl):
    out = tmp_path / 'inter.stl'
    status = main(['intersect', str(unit_cube_stl), str(unit_cube_stl),
                   '-o', str(out), '--translate-b', '0.5', '0', '0', '--ascii'])
    assert status == 0
    assert out.read_text().startswith('solid')
    assert solid_volume(read_stl(out)) == pytest.approx(0.5, rel=1e-5)


def test_subtract_with_epsilon(tmp_path, unit_cube_stl):
    out = tmp_path / 'sub.stl'
    status = main(['subtract', str(unit_cube_stl), str(unit_cube_stl),
                   '-o', str(out), '--translate-b', '0.5', '0', '0', '--epsilon', '1e-4', '-v'])
    assert status == 0
    assert solid_volume(read_stl(out)) == pytest.approx(0.5, rel=1e-5)


def test_missing_input(tmp_path, unit_cube_stl):
    status = main(['union', str(unit_cube_stl), str(tmp_path / 'missing.stl'),
                   '-o', str(tmp_path / 'out.stl')])
    assert status == 1


def test_bad_epsilon(tmp_path, unit_cube_stl):
    status = main(['union', str(unit_cube_stl), str(unit_cube_stl),
                   '-o', str(tmp_path / 'out.stl'), '--epsilon', '0'])
    assert status == 1


def test_bad_operation(unit_cube_stl):
    with pytest.raises(SystemExit):
        main(['xor', str(unit_cube_stl), str(unit_cube_stl), '-o', 'x.stl'])
