"""
South Carolina place names offered as address suggestions.

Declaration order matters: entries with equal scores are suggested in the
order they appear here.
"""

SC_LOCATIONS = (
    'Downtown Charleston, SC',
    'Mount Pleasant, SC',
    'West Ashley, SC',
    'James Island, SC',
    'Johns Island, SC',
    'Folly Beach, SC',
    "Sullivan's Island, SC",
    'Isle of Palms, SC',
    'Daniel Island, SC',
    'North Charleston, SC',
    'Summerville, SC',
    'Goose Creek, SC',
    'Kiawah Island, SC',
    'Seabrook Island, SC',
    'Wadmalaw Island, SC',
    'Edisto Island, SC',
    'Beaufort, SC',
    'Hilton Head Island, SC',
    'Bluffton, SC',
    'Myrtle Beach, SC',
    'Columbia, SC',
    'Greenville, SC',
    'Spartanburg, SC',
    'Rock Hill, SC',
    'Charleston Historic District, SC',
    'French Quarter Charleston, SC',
    'South of Broad Charleston, SC',
    'Harleston Village Charleston, SC',
    'Ansonborough Charleston, SC',
    'Radcliffeborough Charleston, SC',
    'Wagener Terrace Charleston, SC',
    'Hampton Park Terrace Charleston, SC',
    'Avondale Charleston, SC',
    'Park Circle North Charleston, SC',
    'Old Village Mount Pleasant, SC',
    "I'On Mount Pleasant, SC",
    'Dunes West Mount Pleasant, SC',
    'Rivertowne Mount Pleasant, SC',
)

# Shown when the query is only a house number, or nothing matched
POPULAR_LOCATIONS = (
    'Downtown Charleston, SC',
    'Mount Pleasant, SC',
    'Charleston Historic District, SC',
    'Isle of Palms, SC',
    'Folly Beach, SC',
    'Daniel Island, SC',
    'James Island, SC',
    'Kiawah Island, SC',
)
