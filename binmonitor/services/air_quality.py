"""
Air Quality Services

Per-sensor status and whole-bin air quality helpers.
"""

from binmonitor.utils.validation import is_numeric

STATUS_SAFE = 'Safe'
STATUS_BAD = 'Bad'
STATUS_NA = 'N/A'

AIR_QUALITY_GOOD = 'Good'
AIR_QUALITY_BAD = 'Bad'
AIR_QUALITY_NA = 'N/A'


def determine_sensor_status(value, threshold=100.0):
    """Get sensor status from its latest value"""
    if value is None:
        return {'level': STATUS_NA, 'color': 'secondary'}
    if not isinstance(value, (int, float)):
        if not is_numeric(str(value)):
            return {'level': STATUS_NA, 'color': 'secondary'}
        value = float(value)
    
    if value > threshold:
        return {'level': STATUS_BAD, 'color': 'danger'}
    return {'level': STATUS_SAFE, 'color': 'success'}


def overall_air_quality(levels):
    """Combine sensor status levels into the bin's air quality.
    
    Any Bad sensor makes the bin Bad; otherwise a single Safe sensor makes
    it Good. With no usable readings at all the result is N/A.
    """
    levels = list(levels)
    if STATUS_BAD in levels:
        return AIR_QUALITY_BAD
    if STATUS_SAFE in levels:
        return AIR_QUALITY_GOOD
    return AIR_QUALITY_NA
