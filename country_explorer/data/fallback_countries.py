# Bundled dataset used when the countries API is unreachable.
# Same record shape as the API response; border codes may point at countries
# outside this subset and resolve to nothing.


def _flag(code: str) -> str:
    return f"https://flagcdn.com/w320/{code}.png"


FALLBACK_COUNTRIES = [
    {
        "name": {"common": "Germany"},
        "flags": {"png": _flag("de")},
        "population": 83240525,
        "capital": ["Berlin"],
        "region": "Europe",
        "cca3": "DEU",
        "borders": ["AUT", "BEL", "CZE", "DNK", "FRA", "LUX", "NLD", "POL", "CHE"],
    },
    {
        "name": {"common": "France"},
        "flags": {"png": _flag("fr")},
        "population": 67391582,
        "capital": ["Paris"],
        "region": "Europe",
        "cca3": "FRA",
        "borders": ["AND", "BEL", "DEU", "ITA", "LUX", "MCO", "ESP", "CHE"],
    },
    {
        "name": {"common": "Belgium"},
        "flags": {"png": _flag("be")},
        "population": 11555997,
        "capital": ["Brussels"],
        "region": "Europe",
        "cca3": "BEL",
        "borders": ["FRA", "DEU", "LUX", "NLD"],
    },
    {
        "name": {"common": "Netherlands"},
        "flags": {"png": _flag("nl")},
        "population": 16655799,
        "capital": ["Amsterdam"],
        "region": "Europe",
        "cca3": "NLD",
        "borders": ["BEL", "DEU"],
    },
    {
        "name": {"common": "Spain"},
        "flags": {"png": _flag("es")},
        "population": 47351567,
        "capital": ["Madrid"],
        "region": "Europe",
        "cca3": "ESP",
        "borders": ["AND", "FRA", "GIB", "PRT", "MAR"],
    },
    {
        "name": {"common": "Portugal"},
        "flags": {"png": _flag("pt")},
        "population": 10305564,
        "capital": ["Lisbon"],
        "region": "Europe",
        "cca3": "PRT",
        "borders": ["ESP"],
    },
    {
        "name": {"common": "Italy"},
        "flags": {"png": _flag("it")},
        "population": 59554023,
        "capital": ["Rome"],
        "region": "Europe",
        "cca3": "ITA",
        "borders": ["AUT", "FRA", "SMR", "SVN", "CHE", "VAT"],
    },
    {
        "name": {"common": "Switzerland"},
        "flags": {"png": _flag("ch")},
        "population": 8654622,
        "capital": ["Bern"],
        "region": "Europe",
        "cca3": "CHE",
        "borders": ["AUT", "FRA", "ITA", "LIE", "DEU"],
    },
    {
        "name": {"common": "Iceland"},
        "flags": {"png": _flag("is")},
        "population": 366425,
        "capital": ["Reykjavik"],
        "region": "Europe",
        "cca3": "ISL",
        "borders": [],
    },
    {
        "name": {"common": "United States"},
        "flags": {"png": _flag("us")},
        "population": 329484123,
        "capital": ["Washington, D.C."],
        "region": "Americas",
        "cca3": "USA",
        "borders": ["CAN", "MEX"],
    },
    {
        "name": {"common": "Canada"},
        "flags": {"png": _flag("ca")},
        "population": 38005238,
        "capital": ["Ottawa"],
        "region": "Americas",
        "cca3": "CAN",
        "borders": ["USA"],
    },
    {
        "name": {"common": "Mexico"},
        "flags": {"png": _flag("mx")},
        "population": 128932753,
        "capital": ["Mexico City"],
        "region": "Americas",
        "cca3": "MEX",
        "borders": ["BLZ", "GTM", "USA"],
    },
    {
        "name": {"common": "Brazil"},
        "flags": {"png": _flag("br")},
        "population": 212559409,
        "capital": ["Brasília"],
        "region": "Americas",
        "cca3": "BRA",
        "borders": ["ARG", "BOL", "COL", "GUF", "GUY", "PRY", "PER", "SUR", "URY", "VEN"],
    },
    {
        "name": {"common": "Argentina"},
        "flags": {"png": _flag("ar")},
        "population": 45376763,
        "capital": ["Buenos Aires"],
        "region": "Americas",
        "cca3": "ARG",
        "borders": ["BOL", "BRA", "CHL", "PRY", "URY"],
    },
    {
        "name": {"common": "Japan"},
        "flags": {"png": _flag("jp")},
        "population": 125836021,
        "capital": ["Tokyo"],
        "region": "Asia",
        "cca3": "JPN",
        "borders": [],
    },
    {
        "name": {"common": "India"},
        "flags": {"png": _flag("in")},
        "population": 1380004385,
        "capital": ["New Delhi"],
        "region": "Asia",
        "cca3": "IND",
        "borders": ["BGD", "BTN", "MMR", "CHN", "NPL", "PAK"],
    },
    {
        "name": {"common": "China"},
        "flags": {"png": _flag("cn")},
        "population": 1402112000,
        "capital": ["Beijing"],
        "region": "Asia",
        "cca3": "CHN",
        "borders": ["AFG", "BTN", "MMR", "HKG", "IND", "KAZ", "NPL", "PRK", "KGZ", "LAO", "MAC", "MNG", "PAK", "RUS", "TJK", "VNM"],
    },
    {
        "name": {"common": "Nigeria"},
        "flags": {"png": _flag("ng")},
        "population": 206139587,
        "capital": ["Abuja"],
        "region": "Africa",
        "cca3": "NGA",
        "borders": ["BEN", "CMR", "TCD", "NER"],
    },
    {
        "name": {"common": "Kenya"},
        "flags": {"png": _flag("ke")},
        "population": 53771300,
        "capital": ["Nairobi"],
        "region": "Africa",
        "cca3": "KEN",
        "borders": ["ETH", "SOM", "SSD", "TZA", "UGA"],
    },
    {
        "name": {"common": "South Africa"},
        "flags": {"png": _flag("za")},
        "population": 59308690,
        "capital": ["Pretoria", "Bloemfontein", "Cape Town"],
        "region": "Africa",
        "cca3": "ZAF",
        "borders": ["BWA", "LSO", "MOZ", "NAM", "SWZ", "ZWE"],
    },
    {
        "name": {"common": "Morocco"},
        "flags": {"png": _flag("ma")},
        "population": 36910558,
        "capital": ["Rabat"],
        "region": "Africa",
        "cca3": "MAR",
        "borders": ["DZA", "ESH", "ESP"],
    },
    {
        "name": {"common": "Australia"},
        "flags": {"png": _flag("au")},
        "population": 25687041,
        "capital": ["Canberra"],
        "region": "Oceania",
        "cca3": "AUS",
        "borders": [],
    },
    {
        "name": {"common": "New Zealand"},
        "flags": {"png": _flag("nz")},
        "population": 5084300,
        "capital": ["Wellington"],
        "region": "Oceania",
        "cca3": "NZL",
        "borders": [],
    },
    {
        "name": {"common": "Antarctica"},
        "flags": {"png": _flag("aq")},
        "population": 1000,
        "capital": [],
        "region": "Antarctic",
        "cca3": "ATA",
        "borders": [],
    },
]
