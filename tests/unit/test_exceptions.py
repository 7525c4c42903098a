"""Tests for paywall/exceptions.py — exception hierarchy."""

from paywall.exceptions import AppError, OfferPayloadError, UnsupportedBlockTypeError


class TestAppError:
    def test_stores_message_and_user_message(self) -> None:
        err = AppError("internal detail", "Shown to the user")
        assert str(err) == "internal detail"
        assert err.message == "internal detail"
        assert err.user_message == "Shown to the user"

    def test_default_user_message(self) -> None:
        err = AppError("something broke")
        assert "wrong" in err.user_message.lower()

    def test_is_exception(self) -> None:
        assert issubclass(AppError, Exception)


class TestSubclasses:
    def test_offer_payload_inherits_app_error(self) -> None:
        err = OfferPayloadError()
        assert isinstance(err, AppError)
        assert "unavailable" in err.user_message.lower()

    def test_block_type_inherits_app_error(self) -> None:
        err = UnsupportedBlockTypeError()
        assert isinstance(err, AppError)
        assert "layout" in err.user_message.lower()

    def test_custom_message_kept(self) -> None:
        err = UnsupportedBlockTypeError("Unsupported products block type: 'grid'")
        assert str(err) == "Unsupported products block type: 'grid'"

    def test_all_catchable_as_app_error(self) -> None:
        for exc_cls in (OfferPayloadError, UnsupportedBlockTypeError):
            try:
                raise exc_cls()
            except AppError:
                pass  # expected
