"""
Catalog Normalization Core

Modules:
    models      - Data models (validated rows, CanonicalProduct, CanonicalActress, BatchRelatedData)
    common      - Shared utilities (config loader, logging, dates, constants)
    validation  - Type guards and raw row normalizers
    media       - Image URL normalization and full-size rewrites
    providers   - Provider name registry
    mapping     - Product/performer mappers and batch aggregation
"""
