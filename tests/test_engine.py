"""Unit tests for the pay engine.

Dates are in January/February 2025: Jan 1 is a Wednesday, the week of
Dec 30 - Jan 5 belongs to January and the week of Jan 27 - Feb 2 to February.
"""

from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from payday_engine.calculators import (
    PayEngine,
    PaymentType,
    WorkLogIndex,
    calculate_annual_pay,
    calculate_pay,
)
from tests.factories import make_advance, make_employee, make_log, snapshot

JAN = date(2025, 1, 15)
FEB = date(2025, 2, 15)


class TestHourlyEarnings:
    """Hourly earnings, night premium and snapshot precedence."""

    def test_day_shift_hours_times_rate(self, hourly_employee):
        """Plain hourly logs pay hours x rate."""
        logs = [make_log(date(2025, 1, 6), 8), make_log(date(2025, 1, 7), "4.5")]

        result = calculate_pay(hourly_employee, logs, JAN)

        assert result.original_pay == Decimal("125000")
        assert result.base_pay == Decimal("125000")
        assert result.night_pay == Decimal("0")
        assert result.total_work_hours == Decimal("12.5")
        assert result.total_night_work_hours == Decimal("0")

    def test_night_shift_decomposition(self, hourly_employee):
        """A 4 hour night log at 10,000 splits into 40,000 base + 20,000 premium."""
        logs = [make_log(date(2025, 1, 10), 4, is_night_shift=True)]

        result = calculate_pay(hourly_employee, logs, JAN)

        assert result.base_pay == Decimal("40000")
        assert result.night_pay == Decimal("20000")
        assert result.original_pay == Decimal("60000")
        assert result.total_work_hours == Decimal("4")
        assert result.total_night_work_hours == Decimal("4")
        assert result.holiday_allowance == Decimal("0")
        assert result.tax_amount == Decimal("0")
        assert result.final_pay == Decimal("60000")

    def test_original_pay_is_base_plus_night(self, hourly_employee):
        """Mixed day and night logs keep original = base + night."""
        logs = [
            make_log(date(2025, 1, 6), 5),
            make_log(date(2025, 1, 7), 3, is_night_shift=True),
            make_log(date(2025, 1, 8), "2.5", is_night_shift=True),
        ]

        result = calculate_pay(hourly_employee, logs, JAN)

        assert result.base_pay == Decimal("105000")
        assert result.night_pay == Decimal("27500")
        assert result.original_pay == result.base_pay + result.night_pay
        assert result.total_night_work_hours == Decimal("5.5")

    def test_snapshot_rate_takes_precedence(self):
        """A log's snapshot rate wins over the employee's current amount."""
        employee = make_employee(amount=Decimal("20000"))
        logs = [make_log(date(2025, 1, 6), 3, snapshot=snapshot(hourly_rate=10000))]

        result = calculate_pay(employee, logs, JAN)

        assert result.original_pay == Decimal("30000")

    def test_log_without_snapshot_uses_current_rate(self):
        """Only logs carrying a snapshot are pinned."""
        employee = make_employee(amount=Decimal("20000"))
        logs = [
            make_log(date(2025, 1, 6), 3, snapshot=snapshot(hourly_rate=10000)),
            make_log(date(2025, 1, 7), 1),
        ]

        result = calculate_pay(employee, logs, JAN)

        assert result.original_pay == Decimal("50000")

    def test_night_premium_uses_snapshot_rate(self):
        """The 1.5x night rate applies to the resolved (snapshot) rate."""
        employee = make_employee(amount=Decimal("20000"))
        logs = [
            make_log(
                date(2025, 1, 6), 2, is_night_shift=True, snapshot=snapshot(hourly_rate=10000)
            )
        ]

        result = calculate_pay(employee, logs, JAN)

        assert result.original_pay == Decimal("30000")
        assert result.night_pay == Decimal("10000")

    def test_missing_hours_count_as_zero(self, hourly_employee):
        """Hourly logs without hours contribute nothing."""
        logs = [make_log(date(2025, 1, 6)), make_log(date(2025, 1, 7), 2)]

        result = calculate_pay(hourly_employee, logs, JAN)

        assert result.original_pay == Decimal("20000")
        assert result.total_work_hours == Decimal("2")

    def test_multiple_logs_on_same_day_are_summed(self, hourly_employee):
        logs = [make_log(date(2025, 1, 6), 3), make_log(date(2025, 1, 6), 4)]

        result = calculate_pay(hourly_employee, logs, JAN)

        assert result.total_work_hours == Decimal("7")
        assert result.original_pay == Decimal("70000")

    def test_public_holidays_are_paid_like_any_day(self, hourly_employee):
        """New Year's Day hours are counted normally."""
        logs = [make_log(date(2025, 1, 1), 5)]

        result = calculate_pay(hourly_employee, logs, JAN)

        assert result.original_pay == Decimal("50000")


class TestOtherPaymentTypes:
    """Daily, per-task and unknown payment types."""

    def test_daily_pays_flat_rate_per_log(self, daily_employee):
        """Three daily logs pay 3 x 80,000 whatever their hours say."""
        logs = [
            make_log(date(2025, 1, 6), 5, employee_id="emp-daily"),
            make_log(date(2025, 1, 7), 12, employee_id="emp-daily"),
            make_log(date(2025, 1, 8), employee_id="emp-daily", count=Decimal("3")),
        ]

        result = calculate_pay(daily_employee, logs, JAN)

        assert result.original_pay == Decimal("240000")
        assert result.base_pay == Decimal("240000")
        assert result.night_pay == Decimal("0")
        assert result.total_work_hours == Decimal("0")

    def test_per_task_multiplies_count(self, task_employee):
        """Per-task logs pay count x rate, with a missing count meaning 1."""
        logs = [
            make_log(date(2025, 1, 6), employee_id="emp-task", count=Decimal("3")),
            make_log(date(2025, 1, 7), employee_id="emp-task"),
        ]

        result = calculate_pay(task_employee, logs, JAN)

        assert result.original_pay == Decimal("20000")

    def test_per_task_snapshot_rate(self, task_employee):
        logs = [
            make_log(
                date(2025, 1, 6),
                employee_id="emp-task",
                count=Decimal("2"),
                snapshot=snapshot(hourly_rate=4000),
            )
        ]

        result = calculate_pay(task_employee, logs, JAN)

        assert result.original_pay == Decimal("8000")

    def test_daily_never_gets_holiday_allowance(self):
        """The allowance flag is ignored for non-hourly employees."""
        employee = make_employee(
            payment_type=PaymentType.DAILY, amount=Decimal("80000"), apply_holiday_allowance=True
        )
        logs = [make_log(date(2025, 1, d), 8) for d in range(6, 11)]

        result = calculate_pay(employee, logs, JAN)

        assert result.holiday_allowance == Decimal("0")
        assert result.weekly_details == ()

    def test_unknown_payment_type_pays_zero(self):
        """An unrecognised payment type contributes nothing and does not raise."""
        employee = make_employee(payment_type="MONTHLY", tax_rate=Decimal("3.3"))
        logs = [make_log(date(2025, 1, 6), 8)]

        result = calculate_pay(employee, logs, JAN)

        assert employee.payment_type == "MONTHLY"
        assert result.original_pay == Decimal("0")
        assert result.final_pay == Decimal("0")


class TestWeeklyHolidayAllowance:
    """Weekly holiday allowance inside the monthly calculation."""

    def test_fifteen_hours_triggers_allowance(self, allowance_employee):
        """15 hours in one week gives (15/40) x 8 x 10,000 = 30,000."""
        logs = [make_log(date(2025, 1, 6), 8), make_log(date(2025, 1, 8), 7)]

        result = calculate_pay(allowance_employee, logs, JAN)

        assert result.holiday_allowance == Decimal("30000")
        assert result.total_before_tax == Decimal("180000")
        assert len(result.weekly_details) == 1
        week = result.weekly_details[0]
        assert week.week_range == "1.6~1.12"
        assert week.work_hours == Decimal("15")
        assert week.has_holiday_allowance is True
        assert week.allowance_amount == Decimal("30000")

    def test_just_below_threshold_gets_nothing(self, allowance_employee):
        """14.9 hours in a week earns no allowance but is still reported."""
        logs = [make_log(date(2025, 1, 6), "7.9"), make_log(date(2025, 1, 8), 7)]

        result = calculate_pay(allowance_employee, logs, JAN)

        assert result.holiday_allowance == Decimal("0")
        assert len(result.weekly_details) == 1
        assert result.weekly_details[0].has_holiday_allowance is False
        assert result.weekly_details[0].allowance_amount == Decimal("0")

    def test_allowance_capped_at_forty_hours(self, allowance_employee):
        """50 hours in a week counts as 40: 8 x amount."""
        logs = [make_log(date(2025, 1, d), 10) for d in range(13, 18)]

        result = calculate_pay(allowance_employee, logs, JAN)

        assert result.holiday_allowance == Decimal("80000")
        assert result.weekly_details[0].work_hours == Decimal("50")

    def test_night_hours_count_toward_threshold(self, allowance_employee):
        logs = [
            make_log(date(2025, 1, 6), 10),
            make_log(date(2025, 1, 7), 10, is_night_shift=True),
        ]

        result = calculate_pay(allowance_employee, logs, JAN)

        assert result.holiday_allowance == Decimal("40000")

    def test_allowance_disabled_by_flag(self, hourly_employee):
        logs = [make_log(date(2025, 1, d), 8) for d in range(6, 11)]

        result = calculate_pay(hourly_employee, logs, JAN)

        assert result.holiday_allowance == Decimal("0")
        assert result.weekly_details == ()

    def test_weekly_details_are_chronological_and_skip_empty_weeks(self, allowance_employee):
        logs = [
            make_log(date(2025, 1, 22), 5),
            make_log(date(2025, 1, 2), 16),
            make_log(date(2025, 1, 7), 20),
        ]

        result = calculate_pay(allowance_employee, logs, JAN)

        assert [w.week_range for w in result.weekly_details] == [
            "12.30~1.5",
            "1.6~1.12",
            "1.20~1.26",
        ]
        assert result.holiday_allowance == Decimal("32000") + Decimal("40000")

    def test_straddling_week_belongs_to_month_of_its_sunday(self, allowance_employee):
        """Jan 27 - Feb 2 is owned by February even though most hours fall in January."""
        logs = [make_log(date(2025, 1, 28), 10), make_log(date(2025, 2, 1), 6)]

        january = calculate_pay(allowance_employee, logs, JAN)
        february = calculate_pay(allowance_employee, logs, FEB)

        assert january.holiday_allowance == Decimal("0")
        assert january.weekly_details == ()
        assert january.original_pay == Decimal("100000")

        assert february.holiday_allowance == Decimal("32000")
        assert february.original_pay == Decimal("60000")
        assert february.weekly_details[0].week_range == "1.27~2.2"
        assert february.weekly_details[0].work_hours == Decimal("16")

    def test_week_starting_in_previous_month_pulls_cross_month_hours(self, allowance_employee):
        """December hours count toward the Dec 30 - Jan 5 week owned by January."""
        logs = [make_log(date(2024, 12, 30), 10), make_log(date(2025, 1, 2), 6)]

        result = calculate_pay(allowance_employee, logs, JAN)

        assert result.original_pay == Decimal("60000")
        assert result.holiday_allowance == Decimal("32000")

    def test_allowance_uses_current_rate_not_snapshot(self):
        """Known quirk: the allowance ignores snapshots and uses the current amount.

        Earnings use the 10,000 snapshot while the allowance uses today's
        20,000, so a raise changes past allowances.
        """
        employee = make_employee(amount=Decimal("20000"), apply_holiday_allowance=True)
        logs = [
            make_log(date(2025, 1, 6), 10, snapshot=snapshot(hourly_rate=10000)),
            make_log(date(2025, 1, 7), 10, snapshot=snapshot(hourly_rate=10000)),
        ]

        result = calculate_pay(employee, logs, JAN)

        assert result.original_pay == Decimal("200000")
        assert result.holiday_allowance == Decimal("80000")


class TestTaxAndAdvances:
    """Withholding, tax-rate pinning and advance deduction."""

    def test_tax_truncated_to_ten_won(self):
        """100,007 at 3.3% is 3,300.231 which truncates to 3,300."""
        employee = make_employee(
            payment_type=PaymentType.DAILY, amount=Decimal("100007"), tax_rate=Decimal("3.3")
        )
        logs = [make_log(date(2025, 1, 6))]

        result = calculate_pay(employee, logs, JAN)

        assert result.total_before_tax == Decimal("100007")
        assert result.tax_amount == Decimal("3300")
        assert result.final_pay == Decimal("96707")

    def test_tax_applies_to_allowance_too(self):
        employee = make_employee(apply_holiday_allowance=True, tax_rate=Decimal("10"))
        logs = [make_log(date(2025, 1, 6), 8), make_log(date(2025, 1, 8), 7)]

        result = calculate_pay(employee, logs, JAN)

        assert result.total_before_tax == Decimal("180000")
        assert result.tax_amount == Decimal("18000")
        assert result.final_pay == Decimal("162000")

    def test_last_log_snapshot_pins_tax_rate(self):
        """The chronologically last log's snapshot tax rate applies to the whole month."""
        employee = make_employee(tax_rate=Decimal("8.8"))
        logs = [
            make_log(date(2025, 1, 20), 10, snapshot=snapshot(10000, tax_rate="3.3")),
            make_log(date(2025, 1, 6), 10, snapshot=snapshot(10000, tax_rate="0")),
        ]

        result = calculate_pay(employee, logs, JAN)

        assert result.applied_tax_rate == Decimal("3.3")
        assert result.tax_amount == Decimal("6600")

    def test_employee_tax_rate_when_month_has_no_logs(self):
        employee = make_employee(tax_rate=Decimal("3.3"))

        result = calculate_pay(employee, [], JAN)

        assert result.applied_tax_rate == Decimal("3.3")
        assert result.original_pay == Decimal("0")
        assert result.final_pay == Decimal("0")
        assert result.net_pay == Decimal("0")

    def test_advances_deducted_only_within_month(self):
        """A 20,000 advance in January reduces 100,000 to 80,000; February's is ignored."""
        employee = make_employee(
            advances=(
                make_advance(date(2025, 1, 15), 20000),
                make_advance(date(2025, 2, 1), 50000),
                make_advance(date(2024, 12, 31), 10000),
            )
        )
        logs = [make_log(date(2025, 1, 6), 10)]

        result = calculate_pay(employee, logs, JAN)

        assert result.final_pay == Decimal("100000")
        assert result.total_advances == Decimal("20000")
        assert result.net_pay == Decimal("80000")

    def test_net_pay_can_go_negative(self):
        """Advances larger than pay are not clamped."""
        employee = make_employee(advances=(make_advance(date(2025, 1, 3), 50000),))
        logs = [make_log(date(2025, 1, 6), 1)]

        result = calculate_pay(employee, logs, JAN)

        assert result.net_pay == Decimal("-40000")


class TestEngineScope:
    """Filtering, period bounds and determinism."""

    def test_filters_other_employees_and_months(self, hourly_employee):
        logs = [
            make_log(date(2025, 1, 6), 5),
            make_log(date(2025, 1, 6), 9, employee_id="someone-else"),
            make_log(date(2025, 2, 3), 7),
            make_log(date(2024, 12, 31), 3),
        ]

        result = calculate_pay(hourly_employee, logs, JAN)

        assert result.total_work_hours == Decimal("5")
        assert result.period_start == date(2025, 1, 1)
        assert result.period_end == date(2025, 1, 31)

    def test_month_edges_are_inclusive(self, hourly_employee):
        logs = [make_log(date(2025, 1, 1), 1), make_log(date(2025, 1, 31), 2)]

        result = calculate_pay(hourly_employee, logs, JAN)

        assert result.total_work_hours == Decimal("3")

    def test_same_inputs_same_output(self, allowance_employee):
        """Repeated calls are identical and leave inputs untouched."""
        employee = replace(
            allowance_employee,
            tax_rate=Decimal("3.3"),
            advances=(make_advance(date(2025, 1, 9), 5000),),
        )
        logs = [
            make_log(date(2025, 1, 6), 8, is_night_shift=True),
            make_log(date(2025, 1, 8), 9),
            make_log(date(2025, 1, 30), 6),
        ]
        before = list(logs)

        first = calculate_pay(employee, logs, JAN)
        second = calculate_pay(employee, logs, JAN)

        assert first == second
        assert logs == before

    def test_engine_accepts_prebuilt_index(self, hourly_employee):
        logs = [make_log(date(2025, 1, 6), 5)]
        index = WorkLogIndex(logs)

        assert PayEngine(index).index is index
        assert calculate_pay(hourly_employee, index, JAN).original_pay == Decimal("50000")


class TestAnnualPay:
    """Yearly rollup of monthly calculations."""

    @pytest.fixture
    def year_logs(self):
        return [
            make_log(date(2025, 3, 4), 8),
            make_log(date(2025, 3, 5), 8, is_night_shift=True),
            make_log(date(2025, 6, 10), 20),
            make_log(date(2025, 9, 16), 6),
            make_log(date(2025, 11, 11), 12),
            make_log(date(2025, 11, 12), "4.5"),
        ]

    def test_annual_final_pay_matches_monthly_sum(self, year_logs):
        employee = make_employee(apply_holiday_allowance=True, tax_rate=Decimal("3.3"))

        annual = calculate_annual_pay(employee, year_logs, 2025)
        monthly = [calculate_pay(employee, year_logs, date(2025, m, 1)) for m in range(1, 13)]

        assert annual.final_pay == sum((m.final_pay for m in monthly), Decimal("0"))
        assert annual.tax_amount == sum((m.tax_amount for m in monthly), Decimal("0"))
        assert annual.holiday_allowance == sum(
            (m.holiday_allowance for m in monthly), Decimal("0")
        )
        assert annual.total_before_tax == annual.original_pay + annual.holiday_allowance
        assert annual.total_work_hours == Decimal("58.5")
        assert annual.total_night_work_hours == Decimal("8")

    def test_annual_view_omits_weekly_details_and_advances(self, year_logs):
        employee = make_employee(
            apply_holiday_allowance=True,
            advances=(make_advance(date(2025, 3, 10), 30000),),
        )

        annual = calculate_annual_pay(employee, year_logs, 2025)

        assert annual.weekly_details == ()
        assert annual.total_advances == Decimal("0")
        assert annual.net_pay == annual.final_pay
        assert annual.period_start == date(2025, 1, 1)
        assert annual.period_end == date(2025, 12, 31)
