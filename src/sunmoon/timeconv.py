"""Conversions between civil time and the Julian day count used by the position calculators."""

#==============================================================
# Copyright Jody M Sankey 2020
#
# This software may be modified and distributed under the terms
# of the MIT license. See the LICENCE.md file for details.
#==============================================================
# PublicPermissions: True
#==============================================================

from datetime import datetime, date, time, timedelta
from math import floor

from dateutil import tz

from sunmoon.general import DAYS_PER_CENTURY, J2000, JD_OFFSET, MS_IN_DAY, UNIX_EPOCH_JD


def as_utc(instant):
    """Returns the supplied datetime in UTC. Naive datetimes are taken to already be UTC."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=tz.UTC)
    return instant.astimezone(tz.UTC)


def to_julian_date(instant):
    """Convert a datetime.datetime object to a Julian date in days."""
    utc = as_utc(instant)
    days = utc.date().toordinal()
    fraction = (utc - datetime.combine(utc.date(), time.min, tz.UTC)) / timedelta(days=1)
    return JD_OFFSET + days + fraction


def unix_millis_to_julian_date(millis):
    """Convert a count of milliseconds since the unix epoch to a Julian date in days."""
    return millis / MS_IN_DAY + UNIX_EPOCH_JD


def julian_date_to_datetime(jd):
    """Convert a Julian date in days to a UTC datetime.datetime object."""
    days_after_origin = jd - JD_OFFSET
    return (datetime.combine(date.fromordinal(floor(days_after_origin)), time.min, tzinfo=tz.UTC)
        + timedelta(days=1) * (days_after_origin % 1.0))


def julian_centuries_since_j2000(jd):
    """Returns the time since the J2000.0 epoch in Julian centuries."""
    return (jd - J2000) / DAYS_PER_CENTURY


def day_of_year(instant):
    """Returns the ordinal day [1, 366] of the instant within its own calendar year, using the
    instant's own UTC offset."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=tz.UTC)
    return instant.timetuple().tm_yday
