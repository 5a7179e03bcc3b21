from decimal import Decimal

from src.staff_attendance.staff_attendance.payroll.calculator.standard_calculator import StandardPayrollCalculator, round2


def test_salary_example_with_half_days():
    calc = StandardPayrollCalculator()

    effective = calc.effective_working_days(working_days=26, allocated_leaves=2)
    rate = calc.daily_rate(salary=Decimal("30000"), effective_working_days=effective)
    net = calc.net_salary(daily_rate=rate, present_days=20, half_days=2)

    assert effective == 24
    assert round2(rate) == Decimal("1250.00")
    assert net == Decimal("26250.00")


def test_leaves_covering_every_working_day_give_zero_without_error():
    calc = StandardPayrollCalculator()

    effective = calc.effective_working_days(working_days=22, allocated_leaves=30)
    rate = calc.daily_rate(salary=Decimal("30000"), effective_working_days=effective)

    assert effective == 0
    assert rate == 0
    assert calc.net_salary(daily_rate=rate, present_days=10, half_days=3) == Decimal("0.00")


def test_rounding_happens_once_on_the_total():
    calc = StandardPayrollCalculator()
    rate = calc.daily_rate(salary=Decimal("10000"), effective_working_days=3)

    # 3333.333... * 3 would be 9999.99 if the rate were rounded first.
    assert calc.net_salary(daily_rate=rate, present_days=3, half_days=0) == Decimal("10000.00")
    assert round2(rate) == Decimal("3333.33")


def test_round2_is_half_up():
    assert round2(Decimal("0.125")) == Decimal("0.13")
    assert round2(Decimal("2.675")) == Decimal("2.68")
