import logging

from cvchat.utils.logging import PIIMask, mask_pii


def test_email_and_phone_masked():
    text = mask_pii("Contact jane.doe@example.com or +1 415 555 0100")
    assert "example.com" not in text
    assert "jane.doe@***" in text
    assert "555" not in text


def test_date_ranges_untouched():
    assert mask_pii("Engineer at Acme - 2019-2021") == "Engineer at Acme - 2019-2021"


def test_filter_masks_args():
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "user %s (%d)", ("a@b.io", 3), None)
    assert PIIMask().filter(record)
    assert record.getMessage() == "user a@*** (3)"
