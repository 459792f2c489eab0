"""HTTP routers. Thin glue over the pricing engine; no pricing logic lives here."""
