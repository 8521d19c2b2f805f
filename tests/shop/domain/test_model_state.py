from shop.checkout.model_state import ModelState


class TestModelState:
    def test_new_state_is_valid(self):
        assert ModelState().is_valid

    def test_add_model_error(self):
        state = ModelState()
        state.add_model_error("foo", "bar")
        assert not state.is_valid
        assert state.errors == {"foo": ["bar"]}

    def test_errors_accumulate_per_field(self):
        state = ModelState()
        state.add_model_error("email", "one")
        state.add_model_error("email", "two")
        assert state.errors["email"] == ["one", "two"]

    def test_merge_with_prefix(self):
        state = ModelState()
        state.merge({"town": ["is required"], "postcode": "is required"}, prefix="card_contact")
        assert "card_contact.town" in state
        assert state.errors["card_contact.postcode"] == ["is required"]
