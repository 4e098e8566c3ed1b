"""
Row validation for raw provider and storage rows.

Modules:
    type_guards - predicates, coercers, field extractors, result-set helpers
    row_normalizers - raw rows -> typed row models (camelCase or snake_case keys)
"""

from .row_normalizers import (
    to_batch_image_rows,
    to_batch_performer_rows,
    to_batch_sale_rows,
    to_batch_source_rows,
    to_batch_tag_rows,
    to_batch_video_rows,
    to_image_rows,
    to_performer_record,
    to_performer_rows,
    to_product_row,
    to_product_rows,
    to_sale_rows,
    to_source_row,
    to_tag_rows,
    to_video_rows,
)
from .type_guards import (
    compact,
    extract_ids,
    extract_performer_ids,
    extract_product_ids,
    extract_rows_array,
    get_boolean_field,
    get_date_field,
    get_field,
    get_number_field,
    get_string_array_field,
    get_string_field,
    has_asp_name,
    has_count,
    has_id,
    has_performer_id,
    has_product_id,
    has_property,
    is_array,
    is_db_row,
    is_integral,
    is_not_nullish,
    is_number,
    is_object,
    is_positive_integer,
    is_string,
    to_number,
    to_string,
)

__all__ = [
    # Guards
    'is_not_nullish',
    'is_string',
    'is_number',
    'is_positive_integer',
    'is_integral',
    'is_object',
    'is_array',
    'has_property',
    'is_db_row',
    'has_id',
    'has_performer_id',
    'has_product_id',
    'has_count',
    'has_asp_name',
    # Coercers and extractors
    'compact',
    'to_number',
    'to_string',
    'get_field',
    'get_number_field',
    'get_string_field',
    'get_date_field',
    'get_boolean_field',
    'get_string_array_field',
    'extract_rows_array',
    'extract_performer_ids',
    'extract_ids',
    'extract_product_ids',
    # Row normalizers
    'to_product_row',
    'to_product_rows',
    'to_performer_record',
    'to_performer_rows',
    'to_tag_rows',
    'to_image_rows',
    'to_video_rows',
    'to_sale_rows',
    'to_source_row',
    'to_batch_performer_rows',
    'to_batch_tag_rows',
    'to_batch_image_rows',
    'to_batch_video_rows',
    'to_batch_sale_rows',
    'to_batch_source_rows',
]
