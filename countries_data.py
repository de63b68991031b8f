"""
Static countries and dependencies dataset for the Countries Explorer.

Each entry is a plain dict with the keys code, continent, areaInKm2,
population, capital and name. The name mapping is keyed by language name and
always contains an English entry; dependencies and partially recognised
territories do not carry a translation for every supported language.

Figures are 2017 population estimates and total area in square kilometres.
The list is turned into immutable CountryRecord objects by
countries.build_country_records().
"""

COUNTRIES_DATA = [
    # -----------------------------------------------------------------------
    # Asia
    # -----------------------------------------------------------------------
    {
        "code": "AF",
        "continent": "Asia",
        "areaInKm2": 652230,
        "population": 35530081,
        "capital": "Kabul",
        "name": {
            "English": "Afghanistan",
            "Arabic": "أفغانستان",
            "Chinese": "阿富汗",
            "French": "Afghanistan",
            "Hindi": "अफ़ग़ानिस्तान",
            "Korean": "아프가니스탄",
            "Japanese": "アフガニスタン",
            "Russian": "Афганистан",
        },
    },
    {
        "code": "BD",
        "continent": "Asia",
        "areaInKm2": 147570,
        "population": 164669751,
        "capital": "Dhaka",
        "name": {
            "English": "Bangladesh",
            "Arabic": "بنغلاديش",
            "Chinese": "孟加拉国",
            "French": "Bangladesh",
            "Hindi": "बांग्लादेश",
            "Korean": "방글라데시",
            "Japanese": "バングラデシュ",
            "Russian": "Бангладеш",
        },
    },
    {
        "code": "BH",
        "continent": "Asia",
        "areaInKm2": 765,
        "population": 1492584,
        "capital": "Manama",
        "name": {
            "English": "Bahrain",
            "Arabic": "البحرين",
            "Chinese": "巴林",
            "French": "Bahreïn",
            "Hindi": "बहरीन",
            "Korean": "바레인",
            "Japanese": "バーレーン",
            "Russian": "Бахрейн",
        },
    },
    {
        "code": "CN",
        "continent": "Asia",
        "areaInKm2": 9596961,
        "population": 1409517397,
        "capital": "Beijing",
        "name": {
            "English": "China",
            "Arabic": "الصين",
            "Chinese": "中国",
            "French": "Chine",
            "Hindi": "चीन",
            "Korean": "중국",
            "Japanese": "中国",
            "Russian": "Китай",
        },
    },
    {
        "code": "HK",
        "continent": "Asia",
        "areaInKm2": 1104,
        "population": 7364883,
        "capital": "City of Victoria",
        "name": {
            "English": "Hong Kong",
            "Chinese": "香港",
            "French": "Hong Kong",
            "Japanese": "香港",
        },
    },
    {
        "code": "ID",
        "continent": "Asia",
        "areaInKm2": 1904569,
        "population": 263991379,
        "capital": "Jakarta",
        "name": {
            "English": "Indonesia",
            "Arabic": "إندونيسيا",
            "Chinese": "印度尼西亚",
            "French": "Indonésie",
            "Hindi": "इंडोनेशिया",
            "Korean": "인도네시아",
            "Japanese": "インドネシア",
            "Russian": "Индонезия",
        },
    },
    {
        "code": "IN",
        "continent": "Asia",
        "areaInKm2": 3287263,
        "population": 1339180127,
        "capital": "New Delhi",
        "name": {
            "English": "India",
            "Arabic": "الهند",
            "Chinese": "印度",
            "French": "Inde",
            "Hindi": "भारत",
            "Korean": "인도",
            "Japanese": "インド",
            "Russian": "Индия",
        },
    },
    {
        "code": "JP",
        "continent": "Asia",
        "areaInKm2": 377930,
        "population": 127484450,
        "capital": "Tokyo",
        "name": {
            "English": "Japan",
            "Arabic": "اليابان",
            "Chinese": "日本",
            "French": "Japon",
            "Hindi": "जापान",
            "Korean": "일본",
            "Japanese": "日本",
            "Russian": "Япония",
        },
    },
    {
        "code": "KR",
        "continent": "Asia",
        "areaInKm2": 100210,
        "population": 50982212,
        "capital": "Seoul",
        "name": {
            "English": "South Korea",
            "Arabic": "كوريا الجنوبية",
            "Chinese": "韩国",
            "French": "Corée du Sud",
            "Hindi": "दक्षिण कोरिया",
            "Korean": "대한민국",
            "Japanese": "大韓民国",
            "Russian": "Республика Корея",
        },
    },
    {
        "code": "PH",
        "continent": "Asia",
        "areaInKm2": 342353,
        "population": 104918090,
        "capital": "Manila",
        "name": {
            "English": "Philippines",
            "Arabic": "الفلبين",
            "Chinese": "菲律宾",
            "French": "Philippines",
            "Hindi": "फ़िलिपींस",
            "Korean": "필리핀",
            "Japanese": "フィリピン",
            "Russian": "Филиппины",
        },
    },
    {
        "code": "PK",
        "continent": "Asia",
        "areaInKm2": 881912,
        "population": 197015955,
        "capital": "Islamabad",
        "name": {
            "English": "Pakistan",
            "Arabic": "باكستان",
            "Chinese": "巴基斯坦",
            "French": "Pakistan",
            "Hindi": "पाकिस्तान",
            "Korean": "파키스탄",
            "Japanese": "パキスタン",
            "Russian": "Пакистан",
        },
    },
    {
        "code": "SA",
        "continent": "Asia",
        "areaInKm2": 2149690,
        "population": 32938213,
        "capital": "Riyadh",
        "name": {
            "English": "Saudi Arabia",
            "Arabic": "المملكة العربية السعودية",
            "Chinese": "沙特阿拉伯",
            "French": "Arabie saoudite",
            "Hindi": "सऊदी अरब",
            "Korean": "사우디아라비아",
            "Japanese": "サウジアラビア",
            "Russian": "Саудовская Аравия",
        },
    },
    {
        "code": "TL",
        "continent": "Asia",
        "areaInKm2": 14874,
        "population": 1296311,
        "capital": "Dili",
        "name": {
            "English": "Timor-Leste",
            "Arabic": "تيمور الشرقية",
            "Chinese": "东帝汶",
            "French": "Timor oriental",
            "Hindi": "तिमोर-लेस्त",
            "Korean": "동티모르",
            "Japanese": "東ティモール",
            "Russian": "Восточный Тимор",
        },
    },
    # -----------------------------------------------------------------------
    # Europe
    # -----------------------------------------------------------------------
    {
        "code": "DE",
        "continent": "Europe",
        "areaInKm2": 357114,
        "population": 82114224,
        "capital": "Berlin",
        "name": {
            "English": "Germany",
            "Arabic": "ألمانيا",
            "Chinese": "德国",
            "French": "Allemagne",
            "Hindi": "जर्मनी",
            "Korean": "독일",
            "Japanese": "ドイツ",
            "Russian": "Германия",
        },
    },
    {
        "code": "EE",
        "continent": "Europe",
        "areaInKm2": 45227,
        "population": 1309632,
        "capital": "Tallinn",
        "name": {
            "English": "Estonia",
            "Arabic": "إستونيا",
            "Chinese": "爱沙尼亚",
            "French": "Estonie",
            "Hindi": "एस्टोनिया",
            "Korean": "에스토니아",
            "Japanese": "エストニア",
            "Russian": "Эстония",
        },
    },
    {
        "code": "FR",
        "continent": "Europe",
        "areaInKm2": 551695,
        "population": 64979548,
        "capital": "Paris",
        "name": {
            "English": "France",
            "Arabic": "فرنسا",
            "Chinese": "法国",
            "French": "France",
            "Hindi": "फ़्रांस",
            "Korean": "프랑스",
            "Japanese": "フランス",
            "Russian": "Франция",
        },
    },
    {
        "code": "GB",
        "continent": "Europe",
        "areaInKm2": 242900,
        "population": 66181585,
        "capital": "London",
        "name": {
            "English": "United Kingdom",
            "Arabic": "المملكة المتحدة",
            "Chinese": "英国",
            "French": "Royaume-Uni",
            "Hindi": "यूनाइटेड किंगडम",
            "Korean": "영국",
            "Japanese": "イギリス",
            "Russian": "Великобритания",
        },
    },
    {
        "code": "LV",
        "continent": "Europe",
        "areaInKm2": 64559,
        "population": 1949670,
        "capital": "Riga",
        "name": {
            "English": "Latvia",
            "Arabic": "لاتفيا",
            "Chinese": "拉脱维亚",
            "French": "Lettonie",
            "Hindi": "लातविया",
            "Korean": "라트비아",
            "Japanese": "ラトビア",
            "Russian": "Латвия",
        },
    },
    {
        "code": "RU",
        "continent": "Europe",
        "areaInKm2": 17098242,
        "population": 143989754,
        "capital": "Moscow",
        "name": {
            "English": "Russia",
            "Arabic": "روسيا",
            "Chinese": "俄罗斯",
            "French": "Russie",
            "Hindi": "रूस",
            "Korean": "러시아",
            "Japanese": "ロシア",
            "Russian": "Россия",
        },
    },
    {
        "code": "SI",
        "continent": "Europe",
        "areaInKm2": 20273,
        "population": 2079976,
        "capital": "Ljubljana",
        "name": {
            "English": "Slovenia",
            "Arabic": "سلوفينيا",
            "Chinese": "斯洛文尼亚",
            "French": "Slovénie",
            "Hindi": "स्लोवेनिया",
            "Korean": "슬로베니아",
            "Japanese": "スロベニア",
            "Russian": "Словения",
        },
    },
    {
        "code": "VA",
        "continent": "Europe",
        "areaInKm2": 0.44,
        "population": 792,
        "capital": "Vatican City",
        "name": {
            "English": "Vatican City",
            "Arabic": "الفاتيكان",
            "Chinese": "梵蒂冈",
            "French": "Vatican",
            "Hindi": "वेटिकन सिटी",
            "Korean": "바티칸 시국",
            "Japanese": "バチカン",
            "Russian": "Ватикан",
        },
    },
    {
        "code": "XK",
        "continent": "Europe",
        "areaInKm2": 10908,
        "population": 1883018,
        "capital": "Pristina",
        "name": {
            "English": "Kosovo",
            "French": "Kosovo",
            "Russian": "Косово",
        },
    },
    # -----------------------------------------------------------------------
    # Africa
    # -----------------------------------------------------------------------
    {
        "code": "DJ",
        "continent": "Africa",
        "areaInKm2": 23200,
        "population": 956985,
        "capital": "Djibouti",
        "name": {
            "English": "Djibouti",
            "Arabic": "جيبوتي",
            "Chinese": "吉布提",
            "French": "Djibouti",
            "Hindi": "जिबूती",
            "Korean": "지부티",
            "Japanese": "ジブチ",
            "Russian": "Джибути",
        },
    },
    {
        "code": "EG",
        "continent": "Africa",
        "areaInKm2": 1002450,
        "population": 97553151,
        "capital": "Cairo",
        "name": {
            "English": "Egypt",
            "Arabic": "مصر",
            "Chinese": "埃及",
            "French": "Égypte",
            "Hindi": "मिस्र",
            "Korean": "이집트",
            "Japanese": "エジプト",
            "Russian": "Египет",
        },
    },
    {
        "code": "ET",
        "continent": "Africa",
        "areaInKm2": 1104300,
        "population": 104957438,
        "capital": "Addis Ababa",
        "name": {
            "English": "Ethiopia",
            "Arabic": "إثيوبيا",
            "Chinese": "埃塞俄比亚",
            "French": "Éthiopie",
            "Hindi": "इथियोपिया",
            "Korean": "에티오피아",
            "Japanese": "エチオピア",
            "Russian": "Эфиопия",
        },
    },
    {
        "code": "GA",
        "continent": "Africa",
        "areaInKm2": 267668,
        "population": 2025137,
        "capital": "Libreville",
        "name": {
            "English": "Gabon",
            "Arabic": "الغابون",
            "Chinese": "加蓬",
            "French": "Gabon",
            "Hindi": "गैबॉन",
            "Korean": "가봉",
            "Japanese": "ガボン",
            "Russian": "Габон",
        },
    },
    {
        "code": "GW",
        "continent": "Africa",
        "areaInKm2": 36125,
        "population": 1861283,
        "capital": "Bissau",
        "name": {
            "English": "Guinea-Bissau",
            "Arabic": "غينيا بيساو",
            "Chinese": "几内亚比绍",
            "French": "Guinée-Bissau",
            "Hindi": "गिनी-बिसाउ",
            "Korean": "기니비사우",
            "Japanese": "ギニアビサウ",
            "Russian": "Гвинея-Бисау",
        },
    },
    {
        "code": "MU",
        "continent": "Africa",
        "areaInKm2": 2040,
        "population": 1265138,
        "capital": "Port Louis",
        "name": {
            "English": "Mauritius",
            "Arabic": "موريشيوس",
            "Chinese": "毛里求斯",
            "French": "Maurice",
            "Hindi": "मॉरीशस",
            "Korean": "모리셔스",
            "Japanese": "モーリシャス",
            "Russian": "Маврикий",
        },
    },
    {
        "code": "NG",
        "continent": "Africa",
        "areaInKm2": 923768,
        "population": 190886311,
        "capital": "Abuja",
        "name": {
            "English": "Nigeria",
            "Arabic": "نيجيريا",
            "Chinese": "尼日利亚",
            "French": "Nigéria",
            "Hindi": "नाइजीरिया",
            "Korean": "나이지리아",
            "Japanese": "ナイジェリア",
            "Russian": "Нигерия",
        },
    },
    {
        "code": "SZ",
        "continent": "Africa",
        "areaInKm2": 17364,
        "population": 1367254,
        "capital": "Mbabane",
        "name": {
            "English": "Eswatini",
            "Arabic": "إسواتيني",
            "Chinese": "斯威士兰",
            "French": "Eswatini",
            "Hindi": "एस्वातीनी",
            "Korean": "에스와티니",
            "Japanese": "エスワティニ",
            "Russian": "Эсватини",
        },
    },
    {
        "code": "ZA",
        "continent": "Africa",
        "areaInKm2": 1221037,
        "population": 56717156,
        "capital": "Pretoria",
        "name": {
            "English": "South Africa",
            "Arabic": "جنوب أفريقيا",
            "Chinese": "南非",
            "French": "Afrique du Sud",
            "Hindi": "दक्षिण अफ़्रीका",
            "Korean": "남아프리카 공화국",
            "Japanese": "南アフリカ",
            "Russian": "Южно-Африканская Республика",
        },
    },
    # -----------------------------------------------------------------------
    # Americas
    # -----------------------------------------------------------------------
    {
        "code": "AR",
        "continent": "Americas",
        "areaInKm2": 2780400,
        "population": 44271041,
        "capital": "Buenos Aires",
        "name": {
            "English": "Argentina",
            "Arabic": "الأرجنتين",
            "Chinese": "阿根廷",
            "French": "Argentine",
            "Hindi": "अर्जेंटीना",
            "Korean": "아르헨티나",
            "Japanese": "アルゼンチン",
            "Russian": "Аргентина",
        },
    },
    {
        "code": "BO",
        "continent": "Americas",
        "areaInKm2": 1098581,
        "population": 11051600,
        "capital": "Sucre",
        "name": {
            "English": "Bolivia",
            "Arabic": "بوليفيا",
            "Chinese": "玻利维亚",
            "French": "Bolivie",
            "Hindi": "बोलीविया",
            "Korean": "볼리비아",
            "Japanese": "ボリビア",
            "Russian": "Боливия",
        },
    },
    {
        "code": "BR",
        "continent": "Americas",
        "areaInKm2": 8515767,
        "population": 209288278,
        "capital": "Brasília",
        "name": {
            "English": "Brazil",
            "Arabic": "البرازيل",
            "Chinese": "巴西",
            "French": "Brésil",
            "Hindi": "ब्राज़ील",
            "Korean": "브라질",
            "Japanese": "ブラジル",
            "Russian": "Бразилия",
        },
    },
    {
        "code": "CA",
        "continent": "Americas",
        "areaInKm2": 9984670,
        "population": 36624199,
        "capital": "Ottawa",
        "name": {
            "English": "Canada",
            "Arabic": "كندا",
            "Chinese": "加拿大",
            "French": "Canada",
            "Hindi": "कनाडा",
            "Korean": "캐나다",
            "Japanese": "カナダ",
            "Russian": "Канада",
        },
    },
    {
        "code": "CL",
        "continent": "Americas",
        "areaInKm2": 756102,
        "population": 18054726,
        "capital": "Santiago",
        "name": {
            "English": "Chile",
            "Arabic": "تشيلي",
            "Chinese": "智利",
            "French": "Chili",
            "Hindi": "चिली",
            "Korean": "칠레",
            "Japanese": "チリ",
            "Russian": "Чили",
        },
    },
    {
        "code": "CO",
        "continent": "Americas",
        "areaInKm2": 1141748,
        "population": 49065615,
        "capital": "Bogotá",
        "name": {
            "English": "Colombia",
            "Arabic": "كولومبيا",
            "Chinese": "哥伦比亚",
            "French": "Colombie",
            "Hindi": "कोलंबिया",
            "Korean": "콜롬비아",
            "Japanese": "コロンビア",
            "Russian": "Колумбия",
        },
    },
    {
        "code": "GL",
        "continent": "Americas",
        "areaInKm2": 2166086,
        "population": 56480,
        "capital": "Nuuk",
        "name": {
            "English": "Greenland",
            "Chinese": "格陵兰",
            "French": "Groenland",
            "Japanese": "グリーンランド",
            "Russian": "Гренландия",
        },
    },
    {
        "code": "JM",
        "continent": "Americas",
        "areaInKm2": 10991,
        "population": 2890299,
        "capital": "Kingston",
        "name": {
            "English": "Jamaica",
            "Arabic": "جامايكا",
            "Chinese": "牙买加",
            "French": "Jamaïque",
            "Hindi": "जमैका",
            "Korean": "자메이카",
            "Japanese": "ジャマイカ",
            "Russian": "Ямайка",
        },
    },
    {
        "code": "MX",
        "continent": "Americas",
        "areaInKm2": 1964375,
        "population": 129163276,
        "capital": "Mexico City",
        "name": {
            "English": "Mexico",
            "Arabic": "المكسيك",
            "Chinese": "墨西哥",
            "French": "Mexique",
            "Hindi": "मेक्सिको",
            "Korean": "멕시코",
            "Japanese": "メキシコ",
            "Russian": "Мексика",
        },
    },
    {
        "code": "PE",
        "continent": "Americas",
        "areaInKm2": 1285216,
        "population": 32165485,
        "capital": "Lima",
        "name": {
            "English": "Peru",
            "Arabic": "بيرو",
            "Chinese": "秘鲁",
            "French": "Pérou",
            "Hindi": "पेरू",
            "Korean": "페루",
            "Japanese": "ペルー",
            "Russian": "Перу",
        },
    },
    {
        "code": "PR",
        "continent": "Americas",
        "areaInKm2": 8870,
        "population": 3663131,
        "capital": "San Juan",
        "name": {
            "English": "Puerto Rico",
            "Chinese": "波多黎各",
            "French": "Porto Rico",
        },
    },
    {
        "code": "TT",
        "continent": "Americas",
        "areaInKm2": 5130,
        "population": 1369125,
        "capital": "Port of Spain",
        "name": {
            "English": "Trinidad and Tobago",
            "Arabic": "ترينيداد وتوباغو",
            "Chinese": "特立尼达和多巴哥",
            "French": "Trinité-et-Tobago",
            "Hindi": "त्रिनिदाद और टोबैगो",
            "Korean": "트리니다드 토바고",
            "Japanese": "トリニダード・トバゴ",
            "Russian": "Тринидад и Тобаго",
        },
    },
    {
        "code": "US",
        "continent": "Americas",
        "areaInKm2": 9629091,
        "population": 324459463,
        "capital": "Washington, D.C.",
        "name": {
            "English": "United States",
            "Arabic": "الولايات المتحدة",
            "Chinese": "美国",
            "French": "États-Unis",
            "Hindi": "संयुक्त राज्य",
            "Korean": "미국",
            "Japanese": "アメリカ合衆国",
            "Russian": "Соединённые Штаты Америки",
        },
    },
    {
        "code": "VE",
        "continent": "Americas",
        "areaInKm2": 916445,
        "population": 31977065,
        "capital": "Caracas",
        "name": {
            "English": "Venezuela",
            "Arabic": "فنزويلا",
            "Chinese": "委内瑞拉",
            "French": "Venezuela",
            "Hindi": "वेनेज़ुएला",
            "Korean": "베네수엘라",
            "Japanese": "ベネズエラ",
            "Russian": "Венесуэла",
        },
    },
    # -----------------------------------------------------------------------
    # Oceania
    # -----------------------------------------------------------------------
    {
        "code": "AU",
        "continent": "Oceania",
        "areaInKm2": 7692024,
        "population": 24450561,
        "capital": "Canberra",
        "name": {
            "English": "Australia",
            "Arabic": "أستراليا",
            "Chinese": "澳大利亚",
            "French": "Australie",
            "Hindi": "ऑस्ट्रेलिया",
            "Korean": "오스트레일리아",
            "Japanese": "オーストラリア",
            "Russian": "Австралия",
        },
    },
    {
        "code": "FJ",
        "continent": "Oceania",
        "areaInKm2": 18272,
        "population": 905502,
        "capital": "Suva",
        "name": {
            "English": "Fiji",
            "Arabic": "فيجي",
            "Chinese": "斐济",
            "French": "Fidji",
            "Hindi": "फ़िजी",
            "Korean": "피지",
            "Japanese": "フィジー",
            "Russian": "Фиджи",
        },
    },
    {
        "code": "NZ",
        "continent": "Oceania",
        "areaInKm2": 270467,
        "population": 4705818,
        "capital": "Wellington",
        "name": {
            "English": "New Zealand",
            "Arabic": "نيوزيلندا",
            "Chinese": "新西兰",
            "French": "Nouvelle-Zélande",
            "Hindi": "न्यूज़ीलैंड",
            "Korean": "뉴질랜드",
            "Japanese": "ニュージーランド",
            "Russian": "Новая Зеландия",
        },
    },
    {
        "code": "PG",
        "continent": "Oceania",
        "areaInKm2": 462840,
        "population": 8251162,
        "capital": "Port Moresby",
        "name": {
            "English": "Papua New Guinea",
            "Arabic": "بابوا غينيا الجديدة",
            "Chinese": "巴布亚新几内亚",
            "French": "Papouasie-Nouvelle-Guinée",
            "Hindi": "पापुआ न्यू गिनी",
            "Korean": "파푸아뉴기니",
            "Japanese": "パプアニューギニア",
            "Russian": "Папуа — Новая Гвинея",
        },
    },
    {
        "code": "TK",
        "continent": "Oceania",
        "areaInKm2": 12,
        "population": 1411,
        "capital": "Fakaofo",
        "name": {
            "English": "Tokelau",
            "French": "Tokelau",
        },
    },
]
