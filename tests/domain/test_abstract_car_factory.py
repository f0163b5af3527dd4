"""Unit tests for the Abstract Factory products, factories and selector."""

import pytest

from carfactory.domain.exceptions import UnknownVariantError
from carfactory.domain.factory.abstract_car_factory import (
    AbstractCarFactory,
    HatchbackCarFactory,
    SedanCarFactory,
    create_factory,
)
from carfactory.domain.model.gps_car import (
    Mastodon,
    MastodonHatchbackCar,
    MastodonSedanCar,
    Rhino,
    RhinoHatchbackCar,
    RhinoSedanCar,
)
from carfactory.domain.model.variants import BodyStyle


class TestGpsCars:

    @pytest.mark.parametrize(
        "car, expected",
        [
            (MastodonSedanCar(), "[Sedan] Mastodon GPS"),
            (RhinoSedanCar(), "[Sedan] Rhino GPS"),
            (MastodonHatchbackCar(), "[Hatchback] Mastodon GPS"),
            (RhinoHatchbackCar(), "[Hatchback] Rhino GPS"),
        ],
    )
    def test_use_gps_message(self, capsys, car, expected):
        car.use_gps()
        assert capsys.readouterr().out == expected + "\n"

    def test_message_prefix_matches_body_style(self, capsys):
        for car in (MastodonHatchbackCar(), RhinoSedanCar()):
            car.use_gps()
            out = capsys.readouterr().out
            assert out.startswith(f"[{car.body_style.label}]")


class TestFamilyConsistency:

    @pytest.mark.parametrize("factory", [SedanCarFactory(), HatchbackCarFactory()])
    def test_products_share_factory_body_style(self, factory):
        mastodon = factory.create_mastodon()
        rhino = factory.create_rhino()
        assert isinstance(mastodon, Mastodon)
        assert isinstance(rhino, Rhino)
        assert mastodon.body_style is factory.body_style
        assert rhino.body_style is factory.body_style

    def test_sedan_factory_products(self):
        factory = SedanCarFactory()
        assert type(factory.create_mastodon()) is MastodonSedanCar
        assert type(factory.create_rhino()) is RhinoSedanCar

    def test_hatchback_factory_products(self):
        factory = HatchbackCarFactory()
        assert type(factory.create_mastodon()) is MastodonHatchbackCar
        assert type(factory.create_rhino()) is RhinoHatchbackCar

    def test_each_call_returns_a_new_product(self):
        factory = HatchbackCarFactory()
        assert factory.create_rhino() is not factory.create_rhino()

    def test_abstract_factory_is_abstract(self):
        with pytest.raises(TypeError):
            AbstractCarFactory()


class TestCreateFactory:

    def test_sedan_key(self):
        factory = create_factory("sedan")
        assert isinstance(factory, SedanCarFactory)
        assert factory.body_style is BodyStyle.SEDAN

    def test_hatchback_key(self):
        assert isinstance(create_factory(BodyStyle.HATCHBACK), HatchbackCarFactory)

    def test_returns_new_instance_each_time(self):
        assert create_factory("sedan") is not create_factory("sedan")

    def test_unknown_key_rejected(self):
        with pytest.raises(UnknownVariantError, match="expected one of: sedan, hatchback"):
            create_factory("mastodon")
