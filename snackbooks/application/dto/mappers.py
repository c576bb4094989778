"""Entity to response DTO conversion shared by use cases and routes."""

from snackbooks.application.dto.responses import (
    DailySummaryResponse,
    ExpenseEntryResponse,
    IncomeEntryResponse,
    MaterialResponse,
    MaterialUsageResponse,
    OrderResponse,
    PackageLineResponse,
    PaymentStatusResponse,
    RequirementsResponse,
)
from snackbooks.core.entities.ledger import ExpenseEntry, IncomeEntry
from snackbooks.core.entities.order import Order, PackageLineItem
from snackbooks.core.entities.production import Material, MaterialRequirements, MaterialUsage
from snackbooks.core.services.ledger import DailySummary, PaymentSummary


def line_to_response(line: PackageLineItem) -> PackageLineResponse:
    return PackageLineResponse(
        size=line.size,
        quantity=line.quantity,
        unit_price=line.unit_price,
        weight=line.weight,
        amount=line.amount,
    )


def order_to_response(order: Order) -> OrderResponse:
    return OrderResponse(
        id=order.id,  # type: ignore[arg-type]
        customer_name=order.customer_name,
        delivery_date=order.delivery_date,
        price_type=order.price_type,
        status=order.status.value,
        packages=[line_to_response(p) for p in order.packages],
        total_weight=order.total_weight,
        total_packets=order.total_packets,
        total_amount=order.total_amount,
        created_at=order.created_at,
    )


def payment_to_response(summary: PaymentSummary) -> PaymentStatusResponse:
    return PaymentStatusResponse(
        order_id=summary.order_id,
        total_amount=summary.total_amount,
        total_paid=summary.total_paid,
        pending=summary.pending,
        status=summary.status.value,
    )


def income_to_response(entry: IncomeEntry) -> IncomeEntryResponse:
    return IncomeEntryResponse(
        id=entry.id,  # type: ignore[arg-type]
        customer_name=entry.customer_name,
        amount=entry.amount,
        entry_date=entry.entry_date,
        order_id=entry.order_id,
        order_size=entry.order_size,
        payment_method=entry.payment_method.value,
        remarks=entry.remarks,
        created_at=entry.created_at,
    )


def expense_to_response(entry: ExpenseEntry) -> ExpenseEntryResponse:
    return ExpenseEntryResponse(
        id=entry.id,  # type: ignore[arg-type]
        item=entry.item,
        amount=entry.amount,
        entry_date=entry.entry_date,
        is_extra=entry.is_extra,
        remarks=entry.remarks,
        created_at=entry.created_at,
    )


def material_to_response(material: Material) -> MaterialResponse:
    return MaterialResponse(
        id=material.id,  # type: ignore[arg-type]
        name=material.name,
        unit=material.unit,
        price_per_unit=material.price_per_unit,
        stock=material.stock,
        stock_value=material.stock_value,
    )


def requirements_to_response(
    requirements: MaterialRequirements, weight_grams: float, estimated_cost: float
) -> RequirementsResponse:
    return RequirementsResponse(
        weight_grams=weight_grams,
        flour_kg=requirements.flour_kg,
        oil_l=requirements.oil_l,
        salt_kg=requirements.salt_kg,
        spice_kg=requirements.spice_kg,
        gas_minutes=requirements.gas_minutes,
        estimated_cost=estimated_cost,
    )


def usage_to_response(usage: MaterialUsage) -> MaterialUsageResponse:
    return MaterialUsageResponse(
        id=usage.id,  # type: ignore[arg-type]
        usage_date=usage.usage_date,
        batch_size_kg=usage.batch_size_kg,
        requirements=requirements_to_response(
            usage.requirements, usage.batch_size_kg * 1000, usage.total_cost
        ),
        total_cost=usage.total_cost,
        created_at=usage.created_at,
    )


def daily_to_response(summary: DailySummary) -> DailySummaryResponse:
    return DailySummaryResponse(
        day=summary.day,
        total_sales=summary.total_sales,
        order_count=summary.order_count,
        total_weight=summary.total_weight,
        avg_order_value=summary.avg_order_value,
    )
