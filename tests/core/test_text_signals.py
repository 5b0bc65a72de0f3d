import pytest
from scamscope.core.errors import InputValidationError
from scamscope.core.text_signals import (
    R_ADVANCE_FEE,
    R_CAPS,
    R_EXCLAMATIONS,
    R_FINANCIAL_DETAILS,
    R_LARGE_SUM,
    R_LOTTERY,
    R_SHORT_CODE,
    R_TRANSFER_PROMISE,
    caps_ratio,
    score_text,
)

LOTTERY_MSG = (
    "Congratulations! You have won a lucky draw prize of $50000. "
    "Send your bank details now!"
)


def test_lottery_message_scores_critical():
    s = score_text(LOTTERY_MSG)
    # 40 + 35 + 20 + 8 = 103 before the clamp
    assert s.score == 100
    assert s.reasons == (R_LOTTERY, R_FINANCIAL_DETAILS, R_LARGE_SUM, R_SHORT_CODE)


def test_clean_message_scores_zero():
    s = score_text("See you at 5pm for coffee")
    assert s.score == 0
    assert s.reasons == ()


def test_repeated_keyword_reported_once():
    s = score_text("urgent urgent URGENT reply")
    assert s.reasons.count("Contains suspicious keyword: urgent") == 1
    assert s.score == 6


def test_each_distinct_keyword_adds_weight_in_list_order():
    s = score_text("Please verify your password immediately")
    assert s.score == 18
    assert s.reasons == (
        "Contains suspicious keyword: immediately",
        "Contains suspicious keyword: verify",
        "Contains suspicious keyword: password",
    )


def test_phrase_category_counts_once():
    # two advance-fee phrases, one category hit
    s = score_text("pay a processing fee to release the amount")
    assert s.score == 20
    assert s.reasons == (R_ADVANCE_FEE,)


def test_transfer_promise():
    s = score_text("I will send you the money tomorrow")
    assert s.score == 20
    assert s.reasons == (R_TRANSFER_PROMISE,)


def test_short_code_also_counts_as_large_sum():
    s = score_text("your code is 4821")
    assert s.score == 28
    assert R_SHORT_CODE in s.reasons
    assert R_LARGE_SUM in s.reasons


def test_seven_digit_number_is_not_a_short_code():
    s = score_text("call 1234567")
    assert s.score == 20
    assert s.reasons == (R_LARGE_SUM,)


def test_currency_prefixed_three_digits_is_large_sum():
    s = score_text("only $500 left")
    assert s.reasons == (R_LARGE_SUM,)


def test_exclamations_and_caps():
    assert score_text("hello!!!").reasons == (R_EXCLAMATIONS,)
    assert score_text("hello!!").reasons == ()

    s = score_text("HELLO THERE")
    assert s.score == 5
    assert s.reasons == (R_CAPS,)


def test_caps_ratio_handles_empty():
    assert caps_ratio("") == 0.0
    assert caps_ratio("AB") == 1.0


@pytest.mark.parametrize("bad", ["", "   ", "\n\t", None])
def test_blank_input_is_rejected(bad):
    with pytest.raises(InputValidationError) as ei:
        score_text(bad)
    assert ei.value.field == "text"


def test_field_name_in_error():
    with pytest.raises(InputValidationError) as ei:
        score_text("  ", field="transcript")
    assert str(ei.value) == "transcript required"


def test_score_always_clamped():
    loud = (
        "URGENT!!! You are the WINNER of a lucky draw. Claim your prize of Rs 500000 now. "
        "Send your UPI and account number, pay small fee to release the amount, "
        "I will send you the amount. OTP 123456, click and verify password immediately!!!"
    )
    s = score_text(loud)
    assert 0 <= s.score <= 100
    assert s.score == 100


def test_deterministic():
    assert score_text(LOTTERY_MSG) == score_text(LOTTERY_MSG)
