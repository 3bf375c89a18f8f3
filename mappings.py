# mappings.py
# Country rows: (short code, label, demonym). Flag assets live in FLAGS_DIR as <short code lowercase>.svg
countries = [
    ("AF", "Afghanistan", "Afghan"),
    ("AX", "Aland Islands", "Alandish"),
    ("AL", "Albania", "Albanian"),
    ("DZ", "Algeria", "Algerian"),
    ("AS", "American Samoa", "American Samoan"),
    ("AD", "Andorra", "Andorran"),
    ("AO", "Angola", "Angolan"),
    ("AI", "Anguilla", "Anguillian"),
    ("AQ", "Antarctica", "Antarctic"),
    ("AG", "Antigua and Barbuda", "Antiguan"),
    ("AR", "Argentina", "Argentine"),
    ("AM", "Armenia", "Armenian"),
    ("AW", "Aruba", "Aruban"),
    ("AU", "Australia", "Australian"),
    ("AT", "Austria", "Austrian"),
    ("AZ", "Azerbaijan", "Azerbaijani"),
    ("BS", "Bahamas", "Bahamian"),
    ("BH", "Bahrain", "Bahraini"),
    ("BD", "Bangladesh", "Bangladeshi"),
    ("BB", "Barbados", "Barbadian"),
    ("BY", "Belarus", "Belarusian"),
    ("BE", "Belgium", "Belgian"),
    ("BZ", "Belize", "Belizean"),
    ("BJ", "Benin", "Beninese"),
    ("BM", "Bermuda", "Bermudian"),
    ("BT", "Bhutan", "Bhutanese"),
    ("BO", "Bolivia", "Bolivian"),
    ("BQ", "Bonaire, Sint Eustatius and Saba", "Dutch Caribbean"),
    ("BA", "Bosnia and Herzegovina", "Bosnian"),
    ("BW", "Botswana", "Motswana"),
    ("BV", "Bouvet Island", "Bouvet Islander"),
    ("BR", "Brazil", "Brazilian"),
    ("IO", "British Indian Ocean Territory", "Indian"),
    ("BN", "Brunei", "Bruneian"),
    ("BG", "Bulgaria", "Bulgarian"),
    ("BF", "Burkina Faso", "Burkinabe"),
    ("BI", "Burundi", "Burundian"),
    ("CV", "Cabo Verde", "Cape Verdean"),
    ("KH", "Cambodia", "Cambodian"),
    ("CM", "Cameroon", "Cameroonian"),
    ("CA", "Canada", "Canadian"),
    ("KY", "Cayman Islands", "Caymanian"),
    ("CF", "Central African Republic", "Central African"),
    ("TD", "Chad", "Chadian"),
    ("CL", "Chile", "Chilean"),
    ("CN", "China", "Chinese"),
    ("CX", "Christmas Island", "Christmas Islander"),
    ("CC", "Cocos (Keeling) Islands", "Cocos Islander"),
    ("CO", "Colombia", "Colombian"),
    ("KM", "Comoros", "Comoran"),
    ("CG", "Congo", "Congolese"),
    ("CD", "Democratic Republic of the Congo", "Congolese"),
    ("CK", "Cook Islands", "Cook Islander"),
    ("CR", "Costa Rica", "Costa Rican"),
    ("CI", "Côte d'Ivoire", "Ivorian"),
    ("HR", "Croatia", "Croatian"),
    ("CU", "Cuba", "Cuban"),
    ("CW", "Curaçao", "Curaçaoan"),
    ("CY", "Cyprus", "Cypriot"),
    ("CZ", "Czechia", "Czech"),
    ("DK", "Denmark", "Danish"),
    ("DJ", "Djibouti", "Djiboutian"),
    ("DM", "Dominica", "Dominican"),
    ("DO", "Dominican Republic", "Dominican"),
    ("EC", "Ecuador", "Ecuadorian"),
    ("EG", "Egypt", "Egyptian"),
    ("SV", "El Salvador", "Salvadoran"),
    ("GQ", "Equatorial Guinea", "Equatoguinean"),
    ("ER", "Eritrea", "Eritrean"),
    ("EE", "Estonia", "Estonian"),
    ("SZ", "Eswatini", "Swazi"),
    ("ET", "Ethiopia", "Ethiopian"),
    ("FK", "Falkland Islands", "Falkland Islander"),
    ("FO", "Faroe Islands", "Faroese"),
    ("FJ", "Fiji", "Fijian"),
    ("FI", "Finland", "Finnish"),
    ("FR", "France", "French"),
    ("GF", "French Guiana", "French Guianese"),
    ("PF", "French Polynesia", "French Polynesian"),
    ("TF", "French Southern Territories", "French"),
    ("GA", "Gabon", "Gabonese"),
    ("GM", "Gambia", "Gambian"),
    ("GE", "Georgia", "Georgian"),
    ("DE", "Germany", "German"),
    ("GH", "Ghana", "Ghanaian"),
    ("GI", "Gibraltar", "Gibraltarian"),
    ("GR", "Greece", "Greek"),
    ("GL", "Greenland", "Greenlandic"),
    ("GD", "Grenada", "Grenadian"),
    ("GP", "Guadeloupe", "Guadeloupean"),
    ("GU", "Guam", "Guamanian"),
    ("GT", "Guatemala", "Guatemalan"),
    ("GG", "Guernsey", "Guernsey"),
    ("GN", "Guinea", "Guinean"),
    ("GW", "Guinea-Bissau", "Bissau-Guinean"),
    ("GY", "Guyana", "Guyanese"),
    ("HT", "Haiti", "Haitian"),
    ("HM", "Heard Island and McDonald Islands", "Heard Islander"),
    ("VA", "Holy See", "Vatican"),
    ("HN", "Honduras", "Honduran"),
    ("HK", "Hong Kong", "Hongkonger"),
    ("HU", "Hungary", "Hungarian"),
    ("IS", "Iceland", "Icelandic"),
    ("IN", "India", "Indian"),
    ("ID", "Indonesia", "Indonesian"),
    ("IR", "Iran", "Iranian"),
    ("IQ", "Iraq", "Iraqi"),
    ("IE", "Ireland", "Irish"),
    ("IM", "Isle of Man", "Manx"),
    ("IL", "Israel", "Israeli"),
    ("IT", "Italy", "Italian"),
    ("JM", "Jamaica", "Jamaican"),
    ("JP", "Japan", "Japanese"),
    ("JE", "Jersey", "Jersey"),
    ("JO", "Jordan", "Jordanian"),
    ("KZ", "Kazakhstan", "Kazakhstani"),
    ("KE", "Kenya", "Kenyan"),
    ("KI", "Kiribati", "I-Kiribati"),
    ("KP", "North Korea", "North Korean"),
    ("KR", "South Korea", "South Korean"),
    ("KW", "Kuwait", "Kuwaiti"),
    ("KG", "Kyrgyzstan", "Kyrgyzstani"),
    ("LA", "Laos", "Lao"),
    ("LV", "Latvia", "Latvian"),
    ("LB", "Lebanon", "Lebanese"),
    ("LS", "Lesotho", "Basotho"),
    ("LR", "Liberia", "Liberian"),
    ("LY", "Libya", "Libyan"),
    ("LI", "Liechtenstein", "Liechtensteiner"),
    ("LT", "Lithuania", "Lithuanian"),
    ("LU", "Luxembourg", "Luxembourgish"),
    ("MO", "Macao", "Macanese"),
    ("MG", "Madagascar", "Malagasy"),
    ("MW", "Malawi", "Malawian"),
    ("MY", "Malaysia", "Malaysian"),
    ("MV", "Maldives", "Maldivian"),
    ("ML", "Mali", "Malian"),
    ("MT", "Malta", "Maltese"),
    ("MH", "Marshall Islands", "Marshallese"),
    ("MQ", "Martinique", "Martiniquais"),
    ("MR", "Mauritania", "Mauritanian"),
    ("MU", "Mauritius", "Mauritian"),
    ("YT", "Mayotte", "Mahoran"),
    ("MX", "Mexico", "Mexican"),
    ("FM", "Micronesia", "Micronesian"),
    ("MD", "Moldova", "Moldovan"),
    ("MC", "Monaco", "Monegasque"),
    ("MN", "Mongolia", "Mongolian"),
    ("ME", "Montenegro", "Montenegrin"),
    ("MS", "Montserrat", "Montserratian"),
    ("MA", "Morocco", "Moroccan"),
    ("MZ", "Mozambique", "Mozambican"),
    ("MM", "Myanmar", "Burmese"),
    ("NA", "Namibia", "Namibian"),
    ("NR", "Nauru", "Nauruan"),
    ("NP", "Nepal", "Nepali"),
    ("NL", "Netherlands", "Dutch"),
    ("NC", "New Caledonia", "New Caledonian"),
    ("NZ", "New Zealand", "New Zealander"),
    ("NI", "Nicaragua", "Nicaraguan"),
    ("NE", "Niger", "Nigerien"),
    ("NG", "Nigeria", "Nigerian"),
    ("NU", "Niue", "Niuean"),
    ("NF", "Norfolk Island", "Norfolk Islander"),
    ("MK", "North Macedonia", "Macedonian"),
    ("MP", "Northern Mariana Islands", "Northern Marianan"),
    ("NO", "Norway", "Norwegian"),
    ("OM", "Oman", "Omani"),
    ("PK", "Pakistan", "Pakistani"),
    ("PW", "Palau", "Palauan"),
    ("PS", "Palestine", "Palestinian"),
    ("PA", "Panama", "Panamanian"),
    ("PG", "Papua New Guinea", "Papua New Guinean"),
    ("PY", "Paraguay", "Paraguayan"),
    ("PE", "Peru", "Peruvian"),
    ("PH", "Philippines", "Filipino"),
    ("PN", "Pitcairn", "Pitcairn Islander"),
    ("PL", "Poland", "Polish"),
    ("PT", "Portugal", "Portuguese"),
    ("PR", "Puerto Rico", "Puerto Rican"),
    ("QA", "Qatar", "Qatari"),
    ("RE", "Réunion", "Réunionese"),
    ("RO", "Romania", "Romanian"),
    ("RU", "Russia", "Russian"),
    ("RW", "Rwanda", "Rwandan"),
    ("BL", "Saint Barthélemy", "Barthélemois"),
    ("SH", "Saint Helena, Ascension and Tristan da Cunha", "Saint Helenian"),
    ("KN", "Saint Kitts and Nevis", "Kittitian"),
    ("LC", "Saint Lucia", "Saint Lucian"),
    ("MF", "Saint Martin", "Saint-Martinoise"),
    ("PM", "Saint Pierre and Miquelon", "Saint-Pierrais"),
    ("VC", "Saint Vincent and the Grenadines", "Vincentian"),
    ("WS", "Samoa", "Samoan"),
    ("SM", "San Marino", "Sammarinese"),
    ("ST", "Sao Tome and Principe", "Sao Tomean"),
    ("SA", "Saudi Arabia", "Saudi"),
    ("SN", "Senegal", "Senegalese"),
    ("RS", "Serbia", "Serbian"),
    ("SC", "Seychelles", "Seychellois"),
    ("SL", "Sierra Leone", "Sierra Leonean"),
    ("SG", "Singapore", "Singaporean"),
    ("SX", "Sint Maarten", "Sint Maartener"),
    ("SK", "Slovakia", "Slovak"),
    ("SI", "Slovenia", "Slovenian"),
    ("SB", "Solomon Islands", "Solomon Islander"),
    ("SO", "Somalia", "Somali"),
    ("ZA", "South Africa", "South African"),
    ("GS", "South Georgia and the South Sandwich Islands", "South Georgian"),
    ("SS", "South Sudan", "South Sudanese"),
    ("ES", "Spain", "Spanish"),
    ("LK", "Sri Lanka", "Sri Lankan"),
    ("SD", "Sudan", "Sudanese"),
    ("SR", "Suriname", "Surinamese"),
    ("SJ", "Svalbard and Jan Mayen", "Norwegian"),
    ("SE", "Sweden", "Swedish"),
    ("CH", "Switzerland", "Swiss"),
    ("SY", "Syria", "Syrian"),
    ("TW", "Taiwan", "Taiwanese"),
    ("TJ", "Tajikistan", "Tajikistani"),
    ("TZ", "Tanzania", "Tanzanian"),
    ("TH", "Thailand", "Thai"),
    ("TL", "Timor-Leste", "Timorese"),
    ("TG", "Togo", "Togolese"),
    ("TK", "Tokelau", "Tokelauan"),
    ("TO", "Tonga", "Tongan"),
    ("TT", "Trinidad and Tobago", "Trinidadian"),
    ("TN", "Tunisia", "Tunisian"),
    ("TR", "Turkey", "Turkish"),
    ("TM", "Turkmenistan", "Turkmen"),
    ("TC", "Turks and Caicos Islands", "Turks and Caicos Islander"),
    ("TV", "Tuvalu", "Tuvaluan"),
    ("UG", "Uganda", "Ugandan"),
    ("UA", "Ukraine", "Ukrainian"),
    ("AE", "United Arab Emirates", "Emirati"),
    ("GB", "United Kingdom", "British"),
    ("US", "United States", "American"),
    ("UM", "United States Minor Outlying Islands", "American"),
    ("UY", "Uruguay", "Uruguayan"),
    ("UZ", "Uzbekistan", "Uzbek"),
    ("VU", "Vanuatu", "Ni-Vanuatu"),
    ("VE", "Venezuela", "Venezuelan"),
    ("VN", "Vietnam", "Vietnamese"),
    ("VG", "British Virgin Islands", "British Virgin Islander"),
    ("VI", "United States Virgin Islands", "Virgin Islander"),
    ("WF", "Wallis and Futuna", "Wallisian"),
    ("EH", "Western Sahara", "Sahrawi"),
    ("YE", "Yemen", "Yemeni"),
    ("ZM", "Zambia", "Zambian"),
    ("ZW", "Zimbabwe", "Zimbabwean"),
]

# Subdivision tables: subdivision code -> label, in catalog order.
# Composite region keys are built as <country short code>_<subdivision code>.

argentina_regions = {
    "B": "Buenos Aires",
    "C": "Ciudad Autónoma de Buenos Aires",
    "K": "Catamarca",
    "H": "Chaco",
    "U": "Chubut",
    "X": "Córdoba",
    "W": "Corrientes",
    "E": "Entre Ríos",
    "P": "Formosa",
    "Y": "Jujuy",
    "L": "La Pampa",
    "F": "La Rioja",
    "M": "Mendoza",
    "N": "Misiones",
    "Q": "Neuquén",
    "R": "Río Negro",
    "A": "Salta",
    "J": "San Juan",
    "D": "San Luis",
    "Z": "Santa Cruz",
    "S": "Santa Fe",
    "G": "Santiago del Estero",
    "V": "Tierra del Fuego",
    "T": "Tucumán",
}

armenia_regions = {
    "AG": "Aragatsotn",
    "AR": "Ararat",
    "AV": "Armavir",
    "ER": "Yerevan",
    "GR": "Gegharkunik",
    "KT": "Kotayk",
    "LO": "Lori",
    "SH": "Shirak",
    "SU": "Syunik",
    "TV": "Tavush",
    "VD": "Vayots Dzor",
}

australia_regions = {
    "ACT": "Australian Capital Territory",
    "NSW": "New South Wales",
    "NT": "Northern Territory",
    "QLD": "Queensland",
    "SA": "South Australia",
    "TAS": "Tasmania",
    "VIC": "Victoria",
    "WA": "Western Australia",
}

austria_regions = {
    "1": "Burgenland",
    "2": "Carinthia",
    "3": "Lower Austria",
    "4": "Upper Austria",
    "5": "Salzburg",
    "6": "Styria",
    "7": "Tyrol",
    "8": "Vorarlberg",
    "9": "Vienna",
}

belgium_regions = {
    "BRU": "Brussels-Capital Region",
    "VLG": "Flanders",
    "WAL": "Wallonia",
}

brazil_regions = {
    "AC": "Acre",
    "AL": "Alagoas",
    "AP": "Amapá",
    "AM": "Amazonas",
    "BA": "Bahia",
    "CE": "Ceará",
    "DF": "Distrito Federal",
    "ES": "Espírito Santo",
    "GO": "Goiás",
    "MA": "Maranhão",
    "MT": "Mato Grosso",
    "MS": "Mato Grosso do Sul",
    "MG": "Minas Gerais",
    "PA": "Pará",
    "PB": "Paraíba",
    "PR": "Paraná",
    "PE": "Pernambuco",
    "PI": "Piauí",
    "RJ": "Rio de Janeiro",
    "RN": "Rio Grande do Norte",
    "RS": "Rio Grande do Sul",
    "RO": "Rondônia",
    "RR": "Roraima",
    "SC": "Santa Catarina",
    "SP": "São Paulo",
    "SE": "Sergipe",
    "TO": "Tocantins",
}

canada_regions = {
    "AB": "Alberta",
    "BC": "British Columbia",
    "MB": "Manitoba",
    "NB": "New Brunswick",
    "NL": "Newfoundland and Labrador",
    "NS": "Nova Scotia",
    "NT": "Northwest Territories",
    "NU": "Nunavut",
    "ON": "Ontario",
    "PE": "Prince Edward Island",
    "QC": "Quebec",
    "SK": "Saskatchewan",
    "YT": "Yukon",
}

china_regions = {
    "AH": "Anhui",
    "BJ": "Beijing",
    "CQ": "Chongqing",
    "FJ": "Fujian",
    "GS": "Gansu",
    "GD": "Guangdong",
    "GX": "Guangxi",
    "GZ": "Guizhou",
    "HI": "Hainan",
    "HE": "Hebei",
    "HL": "Heilongjiang",
    "HA": "Henan",
    "HB": "Hubei",
    "HN": "Hunan",
    "JS": "Jiangsu",
    "JX": "Jiangxi",
    "JL": "Jilin",
    "LN": "Liaoning",
    "NM": "Inner Mongolia",
    "NX": "Ningxia",
    "QH": "Qinghai",
    "SN": "Shaanxi",
    "SD": "Shandong",
    "SH": "Shanghai",
    "SX": "Shanxi",
    "SC": "Sichuan",
    "TJ": "Tianjin",
    "XZ": "Tibet",
    "XJ": "Xinjiang",
    "YN": "Yunnan",
    "ZJ": "Zhejiang",
}

france_regions = {
    "ARA": "Auvergne-Rhône-Alpes",
    "BFC": "Bourgogne-Franche-Comté",
    "BRE": "Bretagne",
    "CVL": "Centre-Val de Loire",
    "20R": "Corse",
    "GES": "Grand Est",
    "HDF": "Hauts-de-France",
    "IDF": "Île-de-France",
    "NOR": "Normandie",
    "NAQ": "Nouvelle-Aquitaine",
    "OCC": "Occitanie",
    "PDL": "Pays de la Loire",
    "PAC": "Provence-Alpes-Côte d'Azur",
}

germany_regions = {
    "BW": "Baden-Württemberg",
    "BY": "Bavaria",
    "BE": "Berlin",
    "BB": "Brandenburg",
    "HB": "Bremen",
    "HH": "Hamburg",
    "HE": "Hesse",
    "MV": "Mecklenburg-Vorpommern",
    "NI": "Lower Saxony",
    "NW": "North Rhine-Westphalia",
    "RP": "Rhineland-Palatinate",
    "SL": "Saarland",
    "SN": "Saxony",
    "ST": "Saxony-Anhalt",
    "SH": "Schleswig-Holstein",
    "TH": "Thuringia",
}

india_regions = {
    "AN": "Andaman and Nicobar Islands",
    "AP": "Andhra Pradesh",
    "AR": "Arunachal Pradesh",
    "AS": "Assam",
    "BR": "Bihar",
    "CH": "Chandigarh",
    "CG": "Chhattisgarh",
    "DH": "Dadra and Nagar Haveli and Daman and Diu",
    "DL": "Delhi",
    "GA": "Goa",
    "GJ": "Gujarat",
    "HR": "Haryana",
    "HP": "Himachal Pradesh",
    "JK": "Jammu and Kashmir",
    "JH": "Jharkhand",
    "KA": "Karnataka",
    "KL": "Kerala",
    "LA": "Ladakh",
    "LD": "Lakshadweep",
    "MP": "Madhya Pradesh",
    "MH": "Maharashtra",
    "MN": "Manipur",
    "ML": "Meghalaya",
    "MZ": "Mizoram",
    "NL": "Nagaland",
    "OD": "Odisha",
    "PY": "Puducherry",
    "PB": "Punjab",
    "RJ": "Rajasthan",
    "SK": "Sikkim",
    "TN": "Tamil Nadu",
    "TS": "Telangana",
    "TR": "Tripura",
    "UP": "Uttar Pradesh",
    "UK": "Uttarakhand",
    "WB": "West Bengal",
}

italy_regions = {
    "65": "Abruzzo",
    "77": "Basilicata",
    "78": "Calabria",
    "72": "Campania",
    "45": "Emilia-Romagna",
    "36": "Friuli Venezia Giulia",
    "62": "Lazio",
    "42": "Liguria",
    "25": "Lombardy",
    "57": "Marche",
    "67": "Molise",
    "21": "Piedmont",
    "75": "Apulia",
    "88": "Sardinia",
    "82": "Sicily",
    "52": "Tuscany",
    "32": "Trentino-South Tyrol",
    "55": "Umbria",
    "23": "Aosta Valley",
    "34": "Veneto",
}

japan_regions = {
    "01": "Hokkaido",
    "02": "Aomori",
    "03": "Iwate",
    "04": "Miyagi",
    "05": "Akita",
    "06": "Yamagata",
    "07": "Fukushima",
    "08": "Ibaraki",
    "09": "Tochigi",
    "10": "Gunma",
    "11": "Saitama",
    "12": "Chiba",
    "13": "Tokyo",
    "14": "Kanagawa",
    "15": "Niigata",
    "16": "Toyama",
    "17": "Ishikawa",
    "18": "Fukui",
    "19": "Yamanashi",
    "20": "Nagano",
    "21": "Gifu",
    "22": "Shizuoka",
    "23": "Aichi",
    "24": "Mie",
    "25": "Shiga",
    "26": "Kyoto",
    "27": "Osaka",
    "28": "Hyogo",
    "29": "Nara",
    "30": "Wakayama",
    "31": "Tottori",
    "32": "Shimane",
    "33": "Okayama",
    "34": "Hiroshima",
    "35": "Yamaguchi",
    "36": "Tokushima",
    "37": "Kagawa",
    "38": "Ehime",
    "39": "Kochi",
    "40": "Fukuoka",
    "41": "Saga",
    "42": "Nagasaki",
    "43": "Kumamoto",
    "44": "Oita",
    "45": "Miyazaki",
    "46": "Kagoshima",
    "47": "Okinawa",
}

mexico_regions = {
    "AGU": "Aguascalientes",
    "BCN": "Baja California",
    "BCS": "Baja California Sur",
    "CAM": "Campeche",
    "CHP": "Chiapas",
    "CHH": "Chihuahua",
    "CMX": "Ciudad de México",
    "COA": "Coahuila",
    "COL": "Colima",
    "DUR": "Durango",
    "GUA": "Guanajuato",
    "GRO": "Guerrero",
    "HID": "Hidalgo",
    "JAL": "Jalisco",
    "MEX": "México",
    "MIC": "Michoacán",
    "MOR": "Morelos",
    "NAY": "Nayarit",
    "NLE": "Nuevo León",
    "OAX": "Oaxaca",
    "PUE": "Puebla",
    "QUE": "Querétaro",
    "ROO": "Quintana Roo",
    "SLP": "San Luis Potosí",
    "SIN": "Sinaloa",
    "SON": "Sonora",
    "TAB": "Tabasco",
    "TAM": "Tamaulipas",
    "TLA": "Tlaxcala",
    "VER": "Veracruz",
    "YUC": "Yucatán",
    "ZAC": "Zacatecas",
}

netherlands_regions = {
    "DR": "Drenthe",
    "FL": "Flevoland",
    "FR": "Friesland",
    "GE": "Gelderland",
    "GR": "Groningen",
    "LI": "Limburg",
    "NB": "North Brabant",
    "NH": "North Holland",
    "OV": "Overijssel",
    "UT": "Utrecht",
    "ZE": "Zeeland",
    "ZH": "South Holland",
}

new_zealand_regions = {
    "AUK": "Auckland",
    "BOP": "Bay of Plenty",
    "CAN": "Canterbury",
    "GIS": "Gisborne",
    "HKB": "Hawke's Bay",
    "MWT": "Manawatū-Whanganui",
    "MBH": "Marlborough",
    "NSN": "Nelson",
    "NTL": "Northland",
    "OTA": "Otago",
    "STL": "Southland",
    "TKI": "Taranaki",
    "TAS": "Tasman",
    "WKO": "Waikato",
    "WGN": "Wellington",
    "WTC": "West Coast",
}

south_africa_regions = {
    "EC": "Eastern Cape",
    "FS": "Free State",
    "GP": "Gauteng",
    "KZN": "KwaZulu-Natal",
    "LP": "Limpopo",
    "MP": "Mpumalanga",
    "NC": "Northern Cape",
    "NW": "North West",
    "WC": "Western Cape",
}

spain_regions = {
    "AN": "Andalusia",
    "AR": "Aragon",
    "AS": "Asturias",
    "IB": "Balearic Islands",
    "PV": "Basque Country",
    "CN": "Canary Islands",
    "CB": "Cantabria",
    "CL": "Castile and León",
    "CM": "Castilla-La Mancha",
    "CT": "Catalonia",
    "CE": "Ceuta",
    "EX": "Extremadura",
    "GA": "Galicia",
    "RI": "La Rioja",
    "MD": "Madrid",
    "ML": "Melilla",
    "MC": "Murcia",
    "NC": "Navarre",
    "VC": "Valencian Community",
}

switzerland_regions = {
    "AG": "Aargau",
    "AR": "Appenzell Ausserrhoden",
    "AI": "Appenzell Innerrhoden",
    "BL": "Basel-Landschaft",
    "BS": "Basel-Stadt",
    "BE": "Bern",
    "FR": "Fribourg",
    "GE": "Geneva",
    "GL": "Glarus",
    "GR": "Graubünden",
    "JU": "Jura",
    "LU": "Lucerne",
    "NE": "Neuchâtel",
    "NW": "Nidwalden",
    "OW": "Obwalden",
    "SH": "Schaffhausen",
    "SZ": "Schwyz",
    "SO": "Solothurn",
    "SG": "St. Gallen",
    "TG": "Thurgau",
    "TI": "Ticino",
    "UR": "Uri",
    "VS": "Valais",
    "VD": "Vaud",
    "ZG": "Zug",
    "ZH": "Zurich",
}

united_kingdom_regions = {
    "ENG": "England",
    "NIR": "Northern Ireland",
    "SCT": "Scotland",
    "WLS": "Wales",
}

united_states_regions = {
    "AL": "Alabama",
    "AK": "Alaska",
    "AZ": "Arizona",
    "AR": "Arkansas",
    "CA": "California",
    "CO": "Colorado",
    "CT": "Connecticut",
    "DE": "Delaware",
    "DC": "District of Columbia",
    "FL": "Florida",
    "GA": "Georgia",
    "HI": "Hawaii",
    "ID": "Idaho",
    "IL": "Illinois",
    "IN": "Indiana",
    "IA": "Iowa",
    "KS": "Kansas",
    "KY": "Kentucky",
    "LA": "Louisiana",
    "ME": "Maine",
    "MD": "Maryland",
    "MA": "Massachusetts",
    "MI": "Michigan",
    "MN": "Minnesota",
    "MS": "Mississippi",
    "MO": "Missouri",
    "MT": "Montana",
    "NE": "Nebraska",
    "NV": "Nevada",
    "NH": "New Hampshire",
    "NJ": "New Jersey",
    "NM": "New Mexico",
    "NY": "New York",
    "NC": "North Carolina",
    "ND": "North Dakota",
    "OH": "Ohio",
    "OK": "Oklahoma",
    "OR": "Oregon",
    "PA": "Pennsylvania",
    "RI": "Rhode Island",
    "SC": "South Carolina",
    "SD": "South Dakota",
    "TN": "Tennessee",
    "TX": "Texas",
    "UT": "Utah",
    "VT": "Vermont",
    "VA": "Virginia",
    "WA": "Washington",
    "WV": "West Virginia",
    "WI": "Wisconsin",
    "WY": "Wyoming",
}

# Country short code -> subdivision table. Countries missing here have no modeled regions.
country_regions = {
    "AR": argentina_regions,
    "AM": armenia_regions,
    "AU": australia_regions,
    "AT": austria_regions,
    "BE": belgium_regions,
    "BR": brazil_regions,
    "CA": canada_regions,
    "CN": china_regions,
    "FR": france_regions,
    "DE": germany_regions,
    "IN": india_regions,
    "IT": italy_regions,
    "JP": japan_regions,
    "MX": mexico_regions,
    "NL": netherlands_regions,
    "NZ": new_zealand_regions,
    "ZA": south_africa_regions,
    "ES": spain_regions,
    "CH": switzerland_regions,
    "GB": united_kingdom_regions,
    "US": united_states_regions,
}
