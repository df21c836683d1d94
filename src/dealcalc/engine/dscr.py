"""DSCR-loan underwriting: one input set, two independent views.

Lender view: gross rent after a vacancy haircut, only the costs a lender
recognizes (tax, insurance, HOA), debt service at a stress-tested rate plus any
hard-money bridge on the renovation. DSCR is checked against the lender minimum.

Investor view: the note rate and the full realistic expense stack, with cash
flow shown both while the hard-money loan is outstanding and after it is paid off.
"""

import logging
from dataclasses import replace
from decimal import Decimal
from typing import Any

from dealcalc.config import settings
from dealcalc.engine.cashflow import (
    cash_on_cash,
    dscr,
    percentage_costs,
    piti,
    str_monthly_revenue,
)
from dealcalc.engine.debt import loan_amount, monthly_payment
from dealcalc.engine.linking import apply_edit
from dealcalc.engine.short_term import cleaning_cost
from dealcalc.models.inputs import DscrInputs
from dealcalc.models.results import DscrInvestorView, DscrLenderView, DscrMetrics
from dealcalc.models.strategies import DscrStatus, RentalType

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")
MONTHS = Decimal("12")


def gross_monthly_income(inputs: DscrInputs) -> Decimal:
    if inputs.property_type is RentalType.LTR:
        return inputs.ltr_rent
    return str_monthly_revenue(inputs.str_adr, inputs.str_occ)


def hard_money_payment(inputs: DscrInputs) -> Decimal:
    """Monthly P&I on a renovation bridged with hard money, else 0."""
    if not inputs.renovation_financed_hm:
        return ZERO
    return monthly_payment(inputs.renovation_cost, inputs.hm_rate_pct, inputs.hm_term_years)


def lender_view(inputs: DscrInputs) -> DscrLenderView:
    loan = loan_amount(inputs.purchase_price, inputs.down_payment_pct)
    gross = gross_monthly_income(inputs)

    effective_income = gross * MONTHS * (1 - inputs.stress_vacancy / HUNDRED)
    lender_opex = inputs.annual_tax + inputs.insurance_monthly * MONTHS + inputs.hoa_monthly * MONTHS
    noi = effective_income - lender_opex

    primary_debt_service = monthly_payment(loan, inputs.stress_rate, inputs.term_years) * MONTHS
    hm_payment = hard_money_payment(inputs)
    hm_debt_service = hm_payment * MONTHS
    total_debt_service = primary_debt_service + hm_debt_service

    ratio = dscr(noi, total_debt_service)

    return DscrLenderView(
        loan_amount=loan,
        gross_monthly_income=gross,
        effective_gross_income=effective_income,
        operating_expenses=lender_opex,
        noi=noi,
        primary_debt_service=primary_debt_service,
        hard_money_payment=hm_payment,
        hard_money_debt_service=hm_debt_service,
        total_debt_service=total_debt_service,
        dscr=ratio,
        status=DscrStatus.PASS if ratio >= inputs.min_dscr else DscrStatus.FAIL,
        cash_flow=noi - total_debt_service,
        cash_flow_after_hard_money=noi - primary_debt_service,
    )


def investor_view(inputs: DscrInputs) -> DscrInvestorView:
    loan = loan_amount(inputs.purchase_price, inputs.down_payment_pct)
    gross = gross_monthly_income(inputs)
    hm_payment = hard_money_payment(inputs)

    pi = monthly_payment(loan, inputs.interest_rate_pct, inputs.term_years)
    total_piti = piti(pi, inputs.annual_tax, inputs.insurance_monthly)

    management = percentage_costs(gross, inputs.inv_management_pct)
    maintenance = percentage_costs(gross, inputs.inv_maintenance_pct)
    capex = percentage_costs(gross, inputs.inv_capex_pct)
    opex = management + maintenance + capex + inputs.hoa_monthly + inputs.inv_utilities_monthly

    platform = ZERO
    cleaning = ZERO
    if inputs.property_type is RentalType.STR:
        platform = percentage_costs(gross, inputs.inv_platform_pct)
        cleaning = cleaning_cost(inputs.inv_cleaning_fee, inputs.inv_stays_per_month, False)
        opex += platform + cleaning + inputs.inv_supplies_monthly

    cash_flow_after_hm = gross - total_piti - opex
    cash_flow_with_hm = cash_flow_after_hm - hm_payment

    cash_in = inputs.down_payment_amt + inputs.closing_costs
    if not inputs.renovation_financed_hm:
        cash_in += inputs.renovation_cost

    return DscrInvestorView(
        loan_amount=loan,
        monthly_pi=pi,
        piti=total_piti,
        management_monthly=management,
        maintenance_monthly=maintenance,
        capex_monthly=capex,
        platform_monthly=platform,
        cleaning_monthly=cleaning,
        operating_expenses=opex,
        hard_money_payment=hm_payment,
        cash_flow=cash_flow_with_hm,
        cash_flow_after_hard_money=cash_flow_after_hm,
        cash_in=cash_in,
        cash_on_cash_pct=cash_on_cash(cash_flow_with_hm, cash_in),
        cash_on_cash_after_hard_money_pct=cash_on_cash(cash_flow_after_hm, cash_in),
    )


def analyze_dscr(inputs: DscrInputs) -> DscrMetrics:
    return DscrMetrics(lender=lender_view(inputs), investor=investor_view(inputs))


# ---- Stress-test defaults ----

def default_stress_rate(note_rate_pct: Decimal) -> Decimal:
    return note_rate_pct + settings.dscr_stress_rate_spread


def with_default_stress_rate(inputs: DscrInputs) -> DscrInputs:
    return replace(inputs, stress_rate=default_stress_rate(inputs.interest_rate_pct))


def edit_dscr(inputs: DscrInputs, field_name: str, raw_value: Any) -> DscrInputs:
    """Reducer edit for the DSCR record.

    Editing the note rate re-derives the stress rate (a default the user can
    still override afterwards) unless that reset is switched off in settings.
    """
    updated = apply_edit(inputs, field_name, raw_value)
    if field_name == "interest_rate_pct" and settings.dscr_reset_stress_on_rate_edit:
        updated = with_default_stress_rate(updated)
    return updated


def set_dscr_property_type(inputs: DscrInputs, property_type: RentalType | str) -> DscrInputs:
    """Switch LTR/STR and load that type's lender stress presets."""
    property_type = RentalType(property_type)
    preset = settings.dscr_stress_presets[property_type.value]
    logger.debug("DSCR property type -> %s, stress preset %s", property_type.value, preset)
    return with_default_stress_rate(
        replace(
            inputs,
            property_type=property_type,
            stress_vacancy=Decimal(str(preset["stress_vacancy"])),
            min_dscr=Decimal(str(preset["min_dscr"])),
        )
    )
