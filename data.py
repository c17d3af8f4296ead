# data.py
# Tabelle statiche di riferimento (1953-2030). Non vengono mai modificate:
# generation.build_reference_data() le converte in oggetti immutabili e il
# motore ne fa copie profonde.

PARTIES = {
    "LPC": {
        "id": "LPC", "name": "Liberal Party of Canada", "short_name": "Liberal",
        "color": "#D71920", "ideology": "Centre / Centre-Left",
    },
    "CPC": {
        "id": "CPC", "name": "Progressive Conservative / Conservative", "short_name": "Conservative",
        "color": "#1A4FBA", "ideology": "Centre-Right",
    },
    "NDP": {
        "id": "NDP", "name": "NDP / CCF", "short_name": "NDP",
        "color": "#F37021", "ideology": "Centre-Left / Left",
    },
    "BQ": {
        "id": "BQ", "name": "Bloc Québécois", "short_name": "Bloc Québécois",
        "color": "#00ADEF", "ideology": "Quebec Nationalism",
        # Si presenta solo in Quebec
        "restricted_to": "QC",
        "established_year": 1991,
    },
}

# Province e territori (338 seggi in totale)
REGIONS = {
    "YT": {"name": "Yukon", "grouping": "north", "seats": 1},
    "NT": {"name": "Northwest Territories", "grouping": "north", "seats": 1},
    "NU": {"name": "Nunavut", "grouping": "north", "seats": 1},
    "BC": {"name": "British Columbia", "grouping": "west", "seats": 42},
    "AB": {"name": "Alberta", "grouping": "west", "seats": 34},
    "SK": {"name": "Saskatchewan", "grouping": "prairies", "seats": 14},
    "MB": {"name": "Manitoba", "grouping": "prairies", "seats": 14},
    "ON": {"name": "Ontario", "grouping": "central", "seats": 121},
    "QC": {"name": "Québec", "grouping": "central", "seats": 78},
    "NL": {"name": "Newfoundland & Labrador", "grouping": "atlantic", "seats": 7},
    "NB": {"name": "New Brunswick", "grouping": "atlantic", "seats": 10},
    "NS": {"name": "Nova Scotia", "grouping": "atlantic", "seats": 11},
    "PE": {"name": "Prince Edward Island", "grouping": "atlantic", "seats": 4},
}

# Raggruppamenti usati dagli effetti ("all" viene aggiunto da generation)
GROUPINGS = {
    "west": ["BC", "AB"],
    "prairies": ["SK", "MB"],
    "central": ["ON", "QC"],
    "atlantic": ["NB", "NS", "PE", "NL"],
    "north": ["YT", "NT", "NU"],
}

# Baseline 1953 (approssimativo). In AB il Social Credit è mappato su CPC,
# in SK la CCF su NDP.
STARTING_SUPPORT = {
    "YT": {"LPC": 55, "CPC": 30, "NDP": 15, "BQ": 0},
    "NT": {"LPC": 55, "CPC": 30, "NDP": 15, "BQ": 0},
    "NU": {"LPC": 50, "CPC": 25, "NDP": 25, "BQ": 0},
    "BC": {"LPC": 35, "CPC": 25, "NDP": 33, "BQ": 0},
    "AB": {"LPC": 20, "CPC": 30, "NDP": 5, "BQ": 0},
    "SK": {"LPC": 40, "CPC": 15, "NDP": 45, "BQ": 0},
    "MB": {"LPC": 50, "CPC": 30, "NDP": 18, "BQ": 0},
    "ON": {"LPC": 47, "CPC": 43, "NDP": 10, "BQ": 0},
    "QC": {"LPC": 68, "CPC": 28, "NDP": 4, "BQ": 0},
    "NB": {"LPC": 52, "CPC": 43, "NDP": 5, "BQ": 0},
    "NS": {"LPC": 50, "CPC": 44, "NDP": 6, "BQ": 0},
    "PE": {"LPC": 55, "CPC": 44, "NDP": 1, "BQ": 0},
    "NL": {"LPC": 72, "CPC": 25, "NDP": 3, "BQ": 0},
}

ELECTION_SCHEDULE = [
    1953, 1957, 1958, 1962, 1963, 1965, 1968, 1972, 1974,
    1979, 1980, 1984, 1988, 1993, 1997, 2000, 2004, 2006,
    2008, 2011, 2015, 2019, 2021, 2025, 2029,
]

# Effetti: {"party": id | "SELF" | "LEADER", "region" | "grouping": ..., "delta": n}
# "region" è una singola provincia, "grouping" un raggruppamento o "all",
# "CHOICE" viene scelto dal giocatore quando gioca la carta.
EVENTS = [
    # ── 1950s ──
    {
        "id": 'E001', "min_year": 1953, "max_year": 1957,
        "title": 'The Pipeline Debate',
        "description": 'The Liberal government uses closure to ram through a controversial pipeline bill, outraging Parliament and the press.',
        "effects": [
            {"party": 'LPC', "grouping": 'all', "delta": -8},
            {"party": 'CPC', "grouping": 'all', "delta": 6},
            {"party": 'NDP', "grouping": 'all', "delta": 3},
        ],
    },
    {
        "id": 'E002', "min_year": 1953, "max_year": 1960,
        "title": 'Avro Arrow Cancellation',
        "description": 'The PC government cancels the CF-105 Avro Arrow, killing Canada\'s world-leading fighter jet program and thousands of aerospace jobs.',
        "effects": [
            {"party": 'CPC', "region": 'ON', "delta": -10},
            {"party": 'LPC', "region": 'ON', "delta": 5},
            {"party": 'NDP', "region": 'ON', "delta": 4},
        ],
    },
    {
        "id": 'E003', "min_year": 1953, "max_year": 1962,
        "title": 'Diefenbaker\'s Northern Vision',
        "description": 'PM Diefenbaker\'s "Roads to Resources" program sparks excitement about northern development.',
        "effects": [
            {"party": 'CPC', "grouping": 'north', "delta": 12},
            {"party": 'CPC', "grouping": 'prairies',"delta": 6},
        ],
    },
    {
        "id": 'E004', "min_year": 1958, "max_year": 1963,
        "title": 'Bomarc Missile Crisis',
        "description": 'A dispute over nuclear warheads splits the PC cabinet and embarrasses Canada on the world stage.',
        "effects": [
            {"party": 'CPC', "grouping": 'all', "delta": -9},
            {"party": 'LPC', "grouping": 'all', "delta": 5},
        ],
    },

    # ── 1960s ──
    {
        "id": 'E010', "min_year": 1960, "max_year": 1968,
        "title": 'Quiet Revolution in Quebec',
        "description": 'Quebec undergoes rapid modernization, secularization, and a surge of nationalist sentiment.',
        "effects": [
            {"party": 'LPC', "region": 'QC', "delta": -6},
            {"party": 'NDP', "region": 'QC', "delta": -4},
        ],
    },
    {
        "id": 'E011', "min_year": 1962, "max_year": 1968,
        "title": 'Pearson\'s Medicare',
        "description": 'The Liberal government introduces universal hospital insurance and lays the groundwork for medicare.',
        "effects": [
            {"party": 'LPC', "grouping": 'all', "delta": 7},
            {"party": 'NDP', "grouping": 'all', "delta": 4},
            {"party": 'CPC', "grouping": 'all', "delta": -4},
        ],
    },
    {
        "id": 'E012', "min_year": 1965, "max_year": 1968,
        "title": 'Expo 67 & Centennial Pride',
        "description": 'Montreal\'s World\'s Fair and Canada\'s 100th birthday trigger an outpouring of national pride.',
        "effects": [
            {"party": 'LPC', "grouping": 'all', "delta": 8},
        ],
    },
    {
        "id": 'E013', "min_year": 1966, "max_year": 1970,
        "title": 'Trudeaumania!',
        "description": 'Pierre Trudeau\'s charismatic leadership sparks unprecedented excitement about the Liberal Party.',
        "effects": [
            {"party": 'LPC', "grouping": 'all', "delta": 14},
            {"party": 'CPC', "grouping": 'all', "delta": -7},
            {"party": 'NDP', "grouping": 'all', "delta": -4},
        ],
    },

    # ── 1970s ──
    {
        "id": 'E020', "min_year": 1970, "max_year": 1975,
        "title": 'October Crisis',
        "description": 'The FLQ kidnaps politicians in Quebec. Trudeau invokes the War Measures Act — popular nationally but divisive in Quebec.',
        "effects": [
            {"party": 'LPC', "grouping": 'all', "delta": 6},
            {"party": 'LPC', "region": 'QC', "delta": -5},
        ],
    },
    {
        "id": 'E021', "min_year": 1972, "max_year": 1975,
        "title": 'NDP Holds the Balance of Power',
        "description": 'The NDP supports the minority Liberal government, winning significant policy concessions.',
        "effects": [
            {"party": 'NDP', "grouping": 'all', "delta": 8},
            {"party": 'LPC', "grouping": 'all', "delta": 3},
        ],
    },
    {
        "id": 'E022', "min_year": 1973, "max_year": 1978,
        "title": 'Global Oil Crisis',
        "description": 'OPEC oil embargo sends energy prices soaring. Alberta booms; central Canada struggles.',
        "effects": [
            {"party": 'CPC', "region": 'AB', "delta": 10},
            {"party": 'CPC', "region": 'SK', "delta": 5},
            {"party": 'LPC', "region": 'ON', "delta": -5},
            {"party": 'LPC', "region": 'QC', "delta": -5},
        ],
    },
    {
        "id": 'E023', "min_year": 1975, "max_year": 1979,
        "title": 'Parti Québécois Elected',
        "description": 'René Lévesque\'s PQ wins the 1976 Quebec election, putting Quebec sovereignty on the agenda.',
        "effects": [
            {"party": 'LPC', "region": 'QC', "delta": -8},
            {"party": 'BQ', "region": 'QC', "delta": 10},
            {"party": 'LPC', "grouping": 'all', "delta": -3},
        ],
    },
    {
        "id": 'E024', "min_year": 1977, "max_year": 1981,
        "title": 'Bill 101 — French Language Charter',
        "description": 'Quebec\'s Charter of the French Language makes French the only official language of Quebec.',
        "effects": [
            {"party": 'BQ', "region": 'QC', "delta": 8},
            {"party": 'LPC', "region": 'QC', "delta": 4},
            {"party": 'CPC', "region": 'QC', "delta": -5},
        ],
    },

    # ── 1980s ──
    {
        "id": 'E030', "min_year": 1979, "max_year": 1982,
        "title": 'Quebec Referendum — Non l\'emporte',
        "description": 'Quebecers vote 60-40 to stay in Canada. Trudeau promises constitutional renewal.',
        "effects": [
            {"party": 'LPC', "region": 'QC', "delta": 10},
            {"party": 'LPC', "grouping": 'all', "delta": 5},
            {"party": 'BQ', "region": 'QC', "delta": -8},
        ],
    },
    {
        "id": 'E031', "min_year": 1980, "max_year": 1984,
        "title": 'National Energy Program',
        "description": 'Trudeau\'s NEP caps oil prices and taxes Alberta\'s energy revenues, sparking massive western alienation.',
        "effects": [
            {"party": 'LPC', "region": 'AB', "delta": -25},
            {"party": 'LPC', "region": 'BC', "delta": -10},
            {"party": 'LPC', "region": 'SK', "delta": -8},
            {"party": 'CPC', "region": 'AB', "delta": 20},
            {"party": 'CPC', "region": 'BC', "delta": 8},
        ],
    },
    {
        "id": 'E032', "min_year": 1981, "max_year": 1985,
        "title": 'Constitution Repatriated',
        "description": 'Canada gets its own Constitution and Charter of Rights, but Quebec never signs. Legacy is mixed.',
        "effects": [
            {"party": 'LPC', "grouping": 'all', "delta": 5},
            {"party": 'LPC', "region": 'QC', "delta": -6},
        ],
    },
    {
        "id": 'E033', "min_year": 1983, "max_year": 1987,
        "title": 'Mulroney\'s Free Trade Push',
        "description": 'PC PM Mulroney negotiates the Canada-US Free Trade Agreement, deeply dividing Canadians.',
        "effects": [
            {"party": 'CPC', "grouping": 'west', "delta": 8},
            {"party": 'CPC', "region": 'QC', "delta": 5},
            {"party": 'LPC', "grouping": 'all', "delta": -4},
            {"party": 'NDP', "grouping": 'all', "delta": 4},
        ],
    },
    {
        "id": 'E034', "min_year": 1987, "max_year": 1991,
        "title": 'Meech Lake Accord',
        "description": 'Constitutional talks to bring Quebec into the Constitution fall apart, reigniting separatist sentiment.',
        "effects": [
            {"party": 'BQ', "region": 'QC', "delta": 10},
            {"party": 'CPC', "grouping": 'all', "delta": -6},
            {"party": 'LPC', "region": 'QC', "delta": -5},
        ],
    },
    {
        "id": 'E035', "min_year": 1989, "max_year": 1992,
        "title": 'GST Introduced',
        "description": 'The 7% Goods and Services Tax is wildly unpopular, haunting the PC government.',
        "effects": [
            {"party": 'CPC', "grouping": 'all', "delta": -10},
            {"party": 'LPC', "grouping": 'all', "delta": 6},
            {"party": 'NDP', "grouping": 'all', "delta": 3},
        ],
    },

    # ── 1990s ──
    {
        "id": 'E040', "min_year": 1990, "max_year": 1994,
        "title": 'Charlottetown Accord Fails',
        "description": 'A broad constitutional accord fails in a national referendum, killing PC momentum and boosting Reform.',
        "effects": [
            {"party": 'CPC', "grouping": 'all', "delta": -12},
            {"party": 'LPC', "grouping": 'all', "delta": 5},
            {"party": 'NDP', "grouping": 'all', "delta": 3},
        ],
    },
    {
        "id": 'E041', "min_year": 1991, "max_year": 1995,
        "title": 'Reform Party Surge',
        "description": 'Preston Manning\'s Reform Party taps into western alienation and fiscal conservatism, devastating PC support in the West.',
        "effects": [
            {"party": 'CPC', "region": 'AB', "delta": -18},
            {"party": 'CPC', "region": 'BC', "delta": -12},
            {"party": 'CPC', "region": 'SK', "delta": -8},
            {"party": 'CPC', "region": 'MB', "delta": -6},
        ],
    },
    {
        "id": 'E042', "min_year": 1993, "max_year": 1997,
        "title": 'Chrétien\'s Deficit Cutting',
        "description": 'The Liberal government makes dramatic spending cuts, balancing the budget by 1998.',
        "effects": [
            {"party": 'LPC', "grouping": 'all', "delta": 7},
            {"party": 'NDP', "grouping": 'all', "delta": -5},
        ],
    },
    {
        "id": 'E043', "min_year": 1994, "max_year": 1997,
        "title": 'Quebec Referendum 1995 — Non Wins by a Hair',
        "description": 'Quebec votes 50.6% to remain in Canada. The near-miss shakes the nation.',
        "effects": [
            {"party": 'LPC', "region": 'QC', "delta": 6},
            {"party": 'LPC', "grouping": 'all', "delta": 4},
            {"party": 'BQ', "region": 'QC', "delta": -4},
        ],
    },
    {
        "id": 'E044', "min_year": 1997, "max_year": 2002,
        "title": 'Economic Boom (1990s Tech)',
        "description": 'Canada shares in the global economic boom. Unemployment falls, budget surpluses grow.',
        "effects": [
            {"party": 'LPC', "grouping": 'all', "delta": 8},
        ],
    },

    # ── 2000s ──
    {
        "id": 'E050', "min_year": 2001, "max_year": 2004,
        "title": '9/11 and the War on Terror',
        "description": 'Canada joins the response to 9/11 in Afghanistan but refuses to join the Iraq War.',
        "effects": [
            {"party": 'LPC', "grouping": 'all', "delta": 5},
            {"party": 'NDP', "grouping": 'all', "delta": 3},
        ],
    },
    {
        "id": 'E051', "min_year": 2003, "max_year": 2006,
        "title": 'Sponsorship Scandal',
        "description": 'The Liberals are engulfed by a scandal using federal funds to promote federalism in Quebec.',
        "effects": [
            {"party": 'LPC', "region": 'QC', "delta": -18},
            {"party": 'LPC', "grouping": 'all', "delta": -10},
            {"party": 'BQ', "region": 'QC', "delta": 12},
            {"party": 'CPC', "grouping": 'all', "delta": 8},
        ],
    },
    {
        "id": 'E052', "min_year": 2003, "max_year": 2005,
        "title": 'PC + Reform Alliance Merge',
        "description": 'The right unites under Stephen Harper\'s Conservative Party of Canada, ending 10 years of vote splitting.',
        "effects": [
            {"party": 'CPC', "region": 'AB', "delta": 12},
            {"party": 'CPC', "region": 'BC', "delta": 8},
            {"party": 'CPC', "region": 'SK', "delta": 6},
            {"party": 'CPC', "region": 'MB', "delta": 5},
            {"party": 'CPC', "region": 'ON', "delta": 5},
        ],
    },
    {
        "id": 'E053', "min_year": 2005, "max_year": 2010,
        "title": 'Harper\'s Accountability Act',
        "description": 'Harper\'s minority government passes landmark ethics reforms, winning public trust.',
        "effects": [
            {"party": 'CPC', "grouping": 'all', "delta": 6},
            {"party": 'LPC', "grouping": 'all', "delta": -4},
        ],
    },
    {
        "id": 'E054', "min_year": 2007, "max_year": 2010,
        "title": 'Global Financial Crisis',
        "description": 'The 2008 recession hits Canada. The Harper government launches a major stimulus program.',
        "effects": [
            {"party": 'NDP', "grouping": 'all', "delta": 6},
            {"party": 'LPC', "grouping": 'all', "delta": 4},
            {"party": 'CPC', "grouping": 'all', "delta": -4},
        ],
    },

    # ── 2010s ──
    {
        "id": 'E060', "min_year": 2010, "max_year": 2013,
        "title": 'Jack Layton\'s Orange Wave',
        "description": 'Under Jack Layton\'s inspirational leadership, the NDP surges nationally and in Quebec, becoming the Official Opposition.',
        "effects": [
            {"party": 'NDP', "grouping": 'all', "delta": 12},
            {"party": 'NDP', "region": 'QC', "delta": 18},
            {"party": 'BQ', "region": 'QC', "delta": -15},
            {"party": 'LPC', "grouping": 'all', "delta": -8},
        ],
    },
    {
        "id": 'E061', "min_year": 2012, "max_year": 2015,
        "title": 'Senate Expense Scandal',
        "description": 'Several Conservative senators claim improper expenses, damaging the Harper government\'s ethics record.',
        "effects": [
            {"party": 'CPC', "grouping": 'all', "delta": -8},
            {"party": 'LPC', "grouping": 'all', "delta": 4},
            {"party": 'NDP', "grouping": 'all', "delta": 3},
        ],
    },
    {
        "id": 'E062', "min_year": 2013, "max_year": 2015,
        "title": 'Justin Trudeau Leads the Liberals',
        "description": 'The young Justin Trudeau wins the Liberal leadership, revitalizing the party.',
        "effects": [
            {"party": 'LPC', "grouping": 'all', "delta": 10},
            {"party": 'LPC', "region": 'QC', "delta": 8},
        ],
    },
    {
        "id": 'E063', "min_year": 2015, "max_year": 2019,
        "title": 'Real Change — Trudeau Majority',
        "description": 'The Liberals sweep to a strong majority on a platform of sunny ways, electoral reform, and legalizing cannabis.',
        "effects": [
            {"party": 'LPC', "grouping": 'all', "delta": 12},
            {"party": 'NDP', "grouping": 'all', "delta": -6},
            {"party": 'CPC', "grouping": 'all', "delta": -8},
        ],
    },
    {
        "id": 'E064', "min_year": 2017, "max_year": 2020,
        "title": 'SNC-Lavalin Affair',
        "description": 'Attorney General Jody Wilson-Raybould resigns, accusing the PM\'s office of political interference.',
        "effects": [
            {"party": 'LPC', "grouping": 'all', "delta": -8},
            {"party": 'LPC', "region": 'QC', "delta": -5},
            {"party": 'CPC', "grouping": 'all', "delta": 5},
        ],
    },
    {
        "id": 'E065', "min_year": 2018, "max_year": 2021,
        "title": 'Cannabis Legalization',
        "description": 'Canada becomes the second country in the world to federally legalize cannabis.',
        "effects": [
            {"party": 'LPC', "grouping": 'all', "delta": 5},
            {"party": 'NDP', "grouping": 'all', "delta": 3},
        ],
    },

    # ── 2020s ──
    {
        "id": 'E070', "min_year": 2020, "max_year": 2022,
        "title": 'COVID-19 Pandemic',
        "description": 'The pandemic reshapes Canadian society. The federal government\'s CERB support wins broad approval.',
        "effects": [
            {"party": 'LPC', "grouping": 'all', "delta": 10},
            {"party": 'NDP', "grouping": 'all', "delta": 5},
            {"party": 'CPC', "grouping": 'all', "delta": -5},
        ],
    },
    {
        "id": 'E071', "min_year": 2021, "max_year": 2024,
        "title": 'Inflation and Housing Crisis',
        "description": 'Soaring inflation and unaffordable housing fuel public anger, especially among younger Canadians.',
        "effects": [
            {"party": 'LPC', "grouping": 'all', "delta": -10},
            {"party": 'CPC', "grouping": 'all', "delta": 8},
            {"party": 'NDP', "grouping": 'all', "delta": 5},
        ],
    },
    {
        "id": 'E072', "min_year": 2022, "max_year": 2025,
        "title": 'Carbon Tax Debate',
        "description": 'The federal carbon price becomes a lightning rod, uniting western premiers against the Liberals.',
        "effects": [
            {"party": 'LPC', "region": 'AB', "delta": -10},
            {"party": 'LPC', "region": 'SK', "delta": -8},
            {"party": 'LPC', "region": 'MB', "delta": -5},
            {"party": 'CPC', "grouping": 'west', "delta": 8},
            {"party": 'CPC', "grouping": 'prairies',"delta": 6},
        ],
    },
    {
        "id": 'E073', "min_year": 2022, "max_year": 2027,
        "title": 'Arctic Sovereignty Challenge',
        "description": 'Growing Russian and Chinese activity in the Arctic forces Canada to invest in northern defence.',
        "effects": [
            {"party": 'LPC', "grouping": 'north', "delta": 5},
            {"party": 'CPC', "grouping": 'north', "delta": 5},
        ],
    },
    {
        "id": 'E074', "min_year": 2023, "max_year": 2027,
        "title": 'Reconciliation with Indigenous Peoples',
        "description": 'Revelations from residential school sites deepen calls for truth and reconciliation.',
        "effects": [
            {"party": 'NDP', "grouping": 'all', "delta": 6},
            {"party": 'LPC', "grouping": 'all', "delta": 3},
            {"party": 'CPC', "grouping": 'all', "delta": -3},
        ],
    },
    {
        "id": 'E075', "min_year": 2025, "max_year": 2030,
        "title": 'US-Canada Trade War Threat',
        "description": 'American tariff threats force Canada to diversify trade relationships and shore up domestic industry.',
        "effects": [
            {"party": 'LPC', "grouping": 'all', "delta": 4},
            {"party": 'CPC', "grouping": 'all', "delta": 4},
            {"party": 'NDP', "grouping": 'all', "delta": 3},
        ],
    },
    {
        "id": 'E076', "min_year": 2025, "max_year": 2030,
        "title": 'Climate Catastrophe Response',
        "description": 'Extreme weather events drive urgent climate action to the top of the federal agenda.',
        "effects": [
            {"party": 'NDP', "grouping": 'all', "delta": 8},
            {"party": 'LPC', "grouping": 'all', "delta": 5},
            {"party": 'CPC', "grouping": 'all', "delta": -6},
        ],
    },
    {
        "id": 'E077', "min_year": 2026, "max_year": 2030,
        "title": 'Aging Population Crisis',
        "description": 'A wave of retiring Boomers strains pensions, healthcare, and the federal budget.',
        "effects": [
            {"party": 'NDP', "grouping": 'all', "delta": 7},
            {"party": 'LPC', "grouping": 'all', "delta": 3},
            {"party": 'CPC', "grouping": 'all', "delta": 2},
        ],
    },
]

# Carte policy, giocabili una volta per partita
POLICY_CARDS = [
    {
        "id": 'P001', "party": 'all',
        "name": 'National Campaign Blitz',
        "description": 'Launch a media campaign across all regions. Gain +3% support nationally.',
        "cost": 4,
        "effects": [{"party": 'SELF', "grouping": 'all', "delta": 3}],
    },
    {
        "id": 'P002', "party": 'all',
        "name": 'Grassroots Organizing',
        "description": 'Focus ground-game efforts on your weakest region. Gain +8% support in chosen region.',
        "cost": 3,
        "effects": [{"party": 'SELF', "grouping": 'CHOICE', "delta": 8}],
        "requires_choice": "grouping",
    },
    {
        "id": 'P003', "party": 'LPC',
        "name": 'National Unity Message',
        "description": 'Emphasize Canadian unity. Strong in Quebec and Atlantic provinces.',
        "cost": 3,
        "effects": [
            {"party": 'SELF', "region": 'QC', "delta": 6},
            {"party": 'SELF', "grouping": 'atlantic', "delta": 5},
        ],
    },
    {
        "id": 'P004', "party": 'CPC',
        "name": 'Western Alienation Appeal',
        "description": 'Champion Western Canada\'s interests. Strong support boost in the West.',
        "cost": 3,
        "effects": [
            {"party": 'SELF', "grouping": 'west', "delta": 8},
            {"party": 'SELF', "grouping": 'prairies', "delta": 6},
        ],
    },
    {
        "id": 'P005', "party": 'NDP',
        "name": 'Workers\' Coalition',
        "description": 'Unite organized labour and working families. Broad moderate boost.',
        "cost": 3,
        "effects": [
            {"party": 'SELF', "region": 'ON', "delta": 5},
            {"party": 'SELF', "region": 'MB', "delta": 6},
            {"party": 'SELF', "region": 'BC', "delta": 5},
        ],
    },
    {
        "id": 'P006', "party": 'all',
        "name": 'Attack Ad Campaign',
        "description": 'Launch attack ads against the leading opposition party. They lose 5% nationally, you gain 3%.',
        "cost": 3,
        "effects": [
            {"party": 'SELF', "grouping": 'all', "delta": 3},
            {"party": 'LEADER', "grouping": 'all', "delta": -5},
        ],
    },
    {
        "id": 'P007', "party": 'all',
        "name": 'Leader\'s Tour',
        "description": 'Your leader tours a struggling province intensively. Gain +12% support there.',
        "cost": 4,
        "effects": [{"party": 'SELF', "region": 'CHOICE', "delta": 12}],
        "requires_choice": "region",
    },
    {
        "id": 'P008', "party": 'LPC',
        "name": 'Infrastructure Investment',
        "description": 'Announce major infrastructure spending. Broad appeal in urban centres.',
        "cost": 3,
        "effects": [
            {"party": 'SELF', "region": 'ON', "delta": 5},
            {"party": 'SELF', "region": 'QC', "delta": 4},
            {"party": 'SELF', "region": 'BC', "delta": 4},
        ],
    },
    {
        "id": 'P009', "party": 'CPC',
        "name": 'Tax Cut Pledge',
        "description": 'Promise to cut income taxes. Resonates in Ontario and the West.',
        "cost": 3,
        "effects": [
            {"party": 'SELF', "region": 'ON', "delta": 6},
            {"party": 'SELF', "grouping": 'west', "delta": 5},
        ],
    },
    {
        "id": 'P010', "party": 'NDP',
        "name": 'Pharmacare Promise',
        "description": 'Promise universal drug coverage. Strong appeal across all provinces.',
        "cost": 3,
        "effects": [
            {"party": 'SELF', "grouping": 'all', "delta": 5},
        ],
    },
]
