import pytest

from promethean.assets import AssetManager, Font, Sound, Texture


@pytest.fixture
def files(tmp_path):
    paths = {}
    for name in ("a.png", "b.png", "c.png", "s.wav", "f.ttf"):
        p = tmp_path / name
        p.write_bytes(name.encode())
        paths[name] = str(p)
    return paths


def test_texture_hit_returns_same_object(files):
    assets = AssetManager(4)
    first = assets.load_texture(files["a.png"])
    assert isinstance(first, Texture)
    assert first.data == b"a.png"
    assert assets.load_texture(files["a.png"]) is first
    assert len(assets) == 1


def test_missing_file_returns_none_and_is_cached(tmp_path):
    assets = AssetManager(4)
    path = tmp_path / "late.png"
    assert assets.load_texture(path) is None
    path.write_bytes(b"x")
    assert assets.load_texture(path) is None
    assert len(assets) == 1


def test_lru_eviction(files):
    assets = AssetManager(2)
    a = assets.load_texture(files["a.png"])
    b = assets.load_texture(files["b.png"])
    assert assets.load_texture(files["a.png"]) is a
    assets.load_texture(files["c.png"])
    assert len(assets) == 2
    assert assets.load_texture(files["a.png"]) is a
    assert assets.load_texture(files["b.png"]) is not b


def test_kinds_have_separate_keys(files):
    assets = AssetManager(8)
    tex = assets.load_texture(files["s.wav"])
    snd = assets.load_sound(files["s.wav"])
    assert isinstance(snd, Sound)
    assert isinstance(tex, Texture)
    assert len(assets) == 2


def test_fonts_cached_per_size(files):
    assets = AssetManager(8)
    small = assets.load_font(files["f.ttf"], 12)
    large = assets.load_font(files["f.ttf"], 24)
    assert isinstance(small, Font)
    assert small.size == 12 and large.size == 24
    assert small is not large
    assert assets.load_font(files["f.ttf"], 12) is small


def test_texture_ids_unique_and_nonzero(files):
    assets = AssetManager(8)
    ids = {assets.load_texture(files[n]).id for n in ("a.png", "b.png", "c.png")}
    assert len(ids) == 3
    assert 0 not in ids


def test_missing_texture_is_shared():
    placeholder = AssetManager.missing_texture()
    assert AssetManager.missing_texture() is placeholder
    assert placeholder.id > 0


def test_empty_path_rejected():
    assets = AssetManager(2)
    with pytest.raises(ValueError):
        assets.load_texture("")
    with pytest.raises(ValueError):
        assets.load_font("", 10)


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        AssetManager(0)