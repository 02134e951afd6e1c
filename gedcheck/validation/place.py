"""Validators for places and name variations."""

from .base import AbstractValidator


class NameVariationValidator(AbstractValidator):
    """Validates a phonetic or romanized variation of a name."""

    def __init__(self, root, name_variation):
        super().__init__(root)
        self.name_variation = name_variation

    def validate(self) -> None:
        nv = self.name_variation
        if nv is None:
            self.add_error("Name variation is null and cannot be validated")
            return
        self.check_required_string(nv.variation, "variation name", nv)
        self.check_optional_string(nv.variation_type, "variation type", nv)
        self.check_custom_tags(nv)


class PlaceValidator(AbstractValidator):
    """Validates a place structure."""

    def __init__(self, root, place):
        super().__init__(root)
        self.place = place

    def validate(self) -> None:
        place = self.place
        if place is None:
            self.add_error("Place is null and cannot be validated or repaired")
            return

        if place.place_name is None:
            # There is no sensible default for a place name
            self.add_unrepairable("Place name was unspecified", place)
        else:
            self.check_required_string(place.place_name, "place name", place)
        self.check_optional_string(place.place_format, "place format", place)
        self.check_optional_string(place.latitude, "latitude", place)
        self.check_optional_string(place.longitude, "longitude", place)
        self.check_citations(place)
        self.check_custom_tags(place)
        self.check_notes(place)
        self._check_variations('phonetic', "phonetic name variations")
        self._check_variations('romanized', "romanized name variations")

    def _check_variations(self, attribute: str, description: str) -> None:
        variations = self.check_list_structure(description, True, self.place,
                                               self.place.list_ref(attribute))
        if variations is not None:
            for nv in variations:
                NameVariationValidator(self.root, nv).validate()
