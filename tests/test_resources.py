import pytest

from spacefighter.resources import ResourceLoadError, ResourceManager


class Texture:
    def __init__(self):
        self.path = None
        self.unloaded = False

    def load(self, path, manager):
        self.path = path
        return True

    def unload(self):
        self.unloaded = True


class Animation(Texture):
    def is_cloneable(self):
        return True

    def clone(self):
        copy = Animation()
        copy.path = self.path
        return copy


class Broken:
    def load(self, path, manager):
        return False


def test_content_path_is_prepended():
    manager = ResourceManager("Content/")
    texture = manager.load(Texture, "Textures/Bullet.png")
    assert texture.path == "Content/Textures/Bullet.png"
    assert texture.resource_manager is manager


def test_content_path_can_be_skipped():
    manager = ResourceManager("Content/")
    texture = manager.load(Texture, "Fonts/arial.ttf", append_content_path=False)
    assert texture.path == "Fonts/arial.ttf"


def test_cached_resource_is_returned_again():
    manager = ResourceManager()
    first = manager.load(Texture, "a.png")
    second = manager.load(Texture, "a.png")
    assert first is second


def test_uncached_resource_is_loaded_each_time():
    manager = ResourceManager()
    first = manager.load(Texture, "a.png", cache=False)
    second = manager.load(Texture, "a.png", cache=False)
    assert first is not second
    assert second.resource_id == first.resource_id + 1


def test_cloneable_resource_returns_clones_with_new_ids():
    manager = ResourceManager()
    original = manager.load(Animation, "boom.anim")
    clone1 = manager.load(Animation, "boom.anim")
    clone2 = manager.load(Animation, "boom.anim")
    assert clone1 is not original and clone2 is not clone1
    assert clone1.path == original.path
    ids = [original.resource_id, clone1.resource_id, clone2.resource_id]
    assert len(set(ids)) == 3
    assert ids == sorted(ids)


def test_ids_start_at_zero():
    manager = ResourceManager()
    assert manager.load(Texture, "a.png").resource_id == 0


def test_failed_load_raises_and_is_not_cached():
    manager = ResourceManager("Content/")
    with pytest.raises(ResourceLoadError) as info:
        manager.load(Broken, "missing.png")
    assert info.value.path == "Content/missing.png"
    with pytest.raises(ResourceLoadError):
        manager.load(Broken, "missing.png")


def test_wrong_type_for_cached_path_raises():
    manager = ResourceManager()
    manager.load(Texture, "a.png")
    with pytest.raises(TypeError):
        manager.load(Broken, "a.png")


def test_unload_all_releases_resources_and_clones():
    manager = ResourceManager()
    texture = manager.load(Texture, "a.png")
    manager.load(Animation, "boom.anim")
    clone = manager.load(Animation, "boom.anim")
    manager.unload_all()
    assert texture.unloaded and clone.unloaded
    reloaded = manager.load(Texture, "a.png")
    assert reloaded is not texture
    assert reloaded.unloaded is False