"""
Esport Data Tables

Static per-locale esport data. Every locale listed in ESPORT_DEFINITIONS
must provide at least one value for each category.
"""

from esport_faker.domain.entities.entities import EsportDefinition, Locale


# ============================================================
# English (United States) - default locale
# ============================================================

EN_US_ESPORT_DEFINITION = EsportDefinition(
    players=(
        "Faker", "Dendi", "s1mple", "Ninja", "Shroud", "Caps", "Perkz", "Bjergsen",
        "Uzi", "Doublelift", "N0tail", "Puppey", "KuroKy", "Miracle-", "Arteezy",
        "SumaiL", "GeT_RiGhT", "olofmeister", "f0rest", "NiKo", "ZywOo", "device",
        "coldzera", "TenZ", "Scump", "Crimsix", "Serral", "Maru", "Rekkles", "Jankos",
        "Rapha", "Bugha", "Mang0", "Armada", "Leffen", "Hungrybox", "Zain", "MkLeo",
    ),
    teams=(
        "Cloud9", "Team Liquid", "Fnatic", "G2 Esports", "T1", "Evil Geniuses",
        "Natus Vincere", "Team Secret", "OG", "Astralis", "FaZe Clan", "100 Thieves",
        "TSM", "Ninjas in Pyjamas", "Team Vitality", "Virtus.pro", "Gen.G",
        "Sentinels", "OpTic Gaming", "NRG Esports", "Complexity Gaming", "Heroic",
    ),
    leagues=(
        "League of Legends Championship Series", "League of Legends European Championship",
        "League of Legends Champions Korea", "League of Legends Pro League",
        "Overwatch League", "Call of Duty League", "ESL Pro League",
        "Dota Pro Circuit", "Rainbow Six Pro League", "VALORANT Champions Tour",
        "Rocket League Championship Series", "Halo Championship Series",
    ),
    events=(
        "The International", "League of Legends World Championship", "Mid-Season Invitational",
        "IEM Katowice", "ESL One Cologne", "PGL Major Stockholm", "BLAST Premier World Final",
        "Evolution Championship Series", "Fortnite World Cup", "Call of Duty Championship",
        "VALORANT Champions", "Six Invitational", "BlizzCon", "DreamHack Masters",
    ),
    games=(
        "League of Legends", "Dota 2", "Counter-Strike 2", "Overwatch 2", "Fortnite",
        "Call of Duty", "StarCraft II", "Hearthstone", "VALORANT", "Rocket League",
        "Rainbow Six Siege", "Super Smash Bros. Melee", "Street Fighter 6", "Apex Legends",
    ),
)


# ============================================================
# Korean (South Korea)
# ============================================================

KO_KR_ESPORT_DEFINITION = EsportDefinition(
    players=(
        "Faker", "Chovy", "ShowMaker", "Deft", "Peanut", "Canyon", "Keria", "Zeus",
        "Oner", "Gumayusi", "Ruler", "Mata", "Maru", "Rogue", "INnoVation", "Dark",
        "Carpe", "Fate", "JJoNak", "Stax",
    ),
    teams=(
        "T1", "Gen.G", "Dplus KIA", "Hanwha Life Esports", "KT Rolster",
        "DRX", "Kwangdong Freecs", "Nongshim RedForce", "OK BRION", "BNK FEARX",
    ),
    leagues=(
        "League of Legends Champions Korea", "LCK Challengers League",
        "Global StarCraft II League", "Overwatch Contenders Korea",
        "VALORANT Challengers Korea",
    ),
    events=(
        "LCK Spring Finals", "LCK Summer Finals", "KeSPA Cup", "GSL Super Tournament",
        "Asian Games Esports", "League of Legends World Championship",
    ),
    games=(
        "League of Legends", "StarCraft II", "Overwatch 2", "VALORANT",
        "PUBG: Battlegrounds", "Teamfight Tactics",
    ),
)


# ============================================================
# Portuguese (Brazil)
# ============================================================

PT_BR_ESPORT_DEFINITION = EsportDefinition(
    players=(
        "FalleN", "coldzera", "fer", "TACO", "fnx", "KSCERATO", "yuurih", "brTT",
        "Robo", "Tinowns", "Ranger", "aspas", "Less", "Sacy", "Jovem", "Cauanzin",
    ),
    teams=(
        "LOUD", "FURIA Esports", "paiN Gaming", "MIBR", "Imperial Esports",
        "INTZ", "RED Canids", "Fluxo", "Vivo Keyd Stars", "Los Grandes",
    ),
    leagues=(
        "Campeonato Brasileiro de League of Legends", "Circuito Desafiante",
        "Gamers Club Liga Série A", "Free Fire Liga Brasil", "Brasileirão de Rainbow Six",
    ),
    events=(
        "CBLOL Finais", "Game XP", "BGS Esports Cup", "IEM Rio Major",
        "Gamers Club Masters", "Six Invitational",
    ),
    games=(
        "League of Legends", "Counter-Strike 2", "Free Fire", "VALORANT",
        "Rainbow Six Siege", "Fortnite",
    ),
)


# ============================================================
# Polish (Poland)
# ============================================================

PL_PL_ESPORT_DEFINITION = EsportDefinition(
    players=(
        "TaZ", "NEO", "pashaBiceps", "Snax", "byali", "Jankos", "Humanoid",
        "Markoon", "Vetheo", "Magisk", "MICHU", "dycha", "mhL", "siuhy", "Kiles",
    ),
    teams=(
        "Virtus.pro", "AGO Esports", "Illuminar Gaming", "Anonymo Esports",
        "x-kom AGO", "Team Kinguin", "PACT", "Actina PACT", "Izako Boars",
    ),
    leagues=(
        "Ultraliga", "ESL Mistrzostwa Polski", "Polska Liga Esportowa",
        "Ultraliga Druga Dywizja",
    ),
    events=(
        "Intel Extreme Masters Katowice", "Poznań Game Arena", "Ultraliga Finały",
        "ESL Mistrzostwa Polski Finały", "Warsaw Games Week",
    ),
    games=(
        "Counter-Strike 2", "League of Legends", "The Witcher 3: Gwent",
        "VALORANT", "Rainbow Six Siege",
    ),
)


# Mapping of locales to their esport definitions
ESPORT_DEFINITIONS = {
    Locale.EN_US: EN_US_ESPORT_DEFINITION,
    Locale.KO_KR: KO_KR_ESPORT_DEFINITION,
    Locale.PT_BR: PT_BR_ESPORT_DEFINITION,
    Locale.PL_PL: PL_PL_ESPORT_DEFINITION,
}
