"""
Usage Examples for Checkbox API SDK
Demonstrates configuration and a typical shift/receipt workflow
"""

from checkbox_api import (
    CheckboxClient,
    CheckboxConfig,
    CheckboxEnvironment,
    ConfigLoader,
    ConfigValidator,
    EmptyResponseError,
    Good,
    GoodItem,
    Payment,
    PaymentType,
    ReceiptsQueryParams,
    SellReceipt,
    ValidationError,
)


# =============================================================================
# Example 1: Programmatic Configuration
# =============================================================================

def programmatic_config_example() -> CheckboxConfig:
    """Configure SDK programmatically with all options"""
    loader = ConfigLoader()

    return loader.load(
        env=False,
        config={
            "license_key": "your-cash-register-license-key",
            "login": "cashier-login",
            "password": "cashier-password",

            "environment": CheckboxEnvironment.DEV,  # Use PRODUCTION for live
            "client_name": "MyPOS-Terminal",
            "client_version": "1.0.0",
            "connect_timeout": 5,
            "read_timeout": 30,
        },
    )


# =============================================================================
# Example 2: Environment Variables Configuration
# =============================================================================

def env_config_example() -> CheckboxConfig:
    """
    Load configuration from environment variables

    Set these environment variables before running:

    export CHECKBOX_LICENSE_KEY="your-license-key"
    export CHECKBOX_LOGIN="cashier-login"
    export CHECKBOX_PASSWORD="cashier-password"
    export CHECKBOX_ENVIRONMENT="dev"
    """
    return ConfigLoader().load(env=True)


# =============================================================================
# Example 3: Configuration Validation
# =============================================================================

def validation_example() -> None:
    """Validate configuration before use"""
    validator = ConfigValidator()

    result = validator.validate({"login": "cashier"})

    if not result.valid:
        print("Configuration validation failed:")
        for error in result.errors:
            print(f"  - {error.field}: {error.message}")


# =============================================================================
# Example 4: Shift and Receipt Workflow
# =============================================================================

def sell_example(config: CheckboxConfig) -> None:
    """Sign in, make sure a shift is open, sell, fetch the PDF"""
    with CheckboxClient(config) as client:
        client.sign_in_cashier()

        try:
            shift = client.get_cashier_shift()
        except EmptyResponseError:
            shift = client.create_shift()
        print(f"Shift {shift.id}: {shift.status.value if shift.status else None}")

        receipt = SellReceipt(
            goods=[
                GoodItem(
                    good=Good(code="COFFEE-1", name="Coffee", price=4500),
                    quantity=2000,  # 2 pcs
                ),
            ],
            payments=[Payment(type=PaymentType.CARD, value=9000)],
        )

        try:
            issued = client.create_sell_receipt(receipt)
        except ValidationError as e:
            print(f"Receipt rejected: {e.details}")
            return

        pdf = client.get_receipt_pdf(issued.id)
        with open(f"receipt-{issued.id}.pdf", "wb") as f:
            f.write(pdf)

        latest = client.get_receipts(ReceiptsQueryParams(desc=True, limit=5))
        for item in latest.results:
            print(f"  {item.serial} {item.type.value if item.type else None} {item.total_sum}")

        client.sign_out_cashier()


# =============================================================================
# Run Examples
# =============================================================================

if __name__ == "__main__":
    print("=== Checkbox API Examples ===\n")

    print("Configuration Validation:")
    validation_example()
    print()

    print("Programmatic Configuration:")
    print(programmatic_config_example())
