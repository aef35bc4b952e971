"""Building blocks for an SAP HANA client: server versions, identifiers, a versioned map, SQL trace, dialing, value types and spatial encoders."""

__version__ = "0.103.3"