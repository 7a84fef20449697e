"""
Example config builder.

Builds a fully populated config (every well-known attribute plus custom
ones) for demos and tests.
"""
from asminfo.model import EMPTY, AssemblyInfoConfig


def build_example_config(output_file: str = "Properties/AssemblyInfo.cs", language: str = "cs") -> AssemblyInfoConfig:
    return AssemblyInfoConfig(
        output_file=output_file,
        language=language,
        namespaces=("System.Resources", "System.Runtime.CompilerServices"),
        title="Contoso.Billing",
        description="Invoice generation and ledger export",
        company_name="Contoso Ltd",
        product_name="Contoso Billing",
        copyright="Copyright (c) Contoso Ltd 2026",
        trademark="Contoso",
        com_visible=False,
        com_guid="3f2504e0-4f89-11d3-9a0c-0305e82c3301",
        version="2.4.0.0",
        file_version="2.4.1.117",
        custom_attributes={
            "NeutralResourcesLanguage": "en-GB",
            "CLSCompliant": True,
            "AllowPartiallyTrustedCallers": EMPTY,
        },
    )
