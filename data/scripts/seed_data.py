# SPDX-FileCopyrightText: 2025 2025 wahl.chat
#
# SPDX-License-Identifier: PolyForm-Noncommercial-1.0.0

AGREE = "Stimme zu"
DISAGREE = "Stimme nicht zu"
NEUTRAL = "Neutral"

QUIZZES = [
    {
        "title": "Wahlkompass: Kurz & Knapp",
        "description": "Die wichtigsten Themen in 10 schnellen Fragen.",
        "category": "quick",
        "image_url": "https://tse4.mm.bing.net/th/id/OIP.NkMi21UpsXnB4RiAB_wsLQHaEK?cb=defcachec2&rs=1&pid=ImgDetMain&o=7&rm=3",
        "questions": [
            {
                "text": "Sollte Deutschland mehr Geld für die Bundeswehr ausgeben?",
                "options": [(AGREE, "CDU"), (DISAGREE, "LINKE"), (NEUTRAL, "SPD")],
            },
            {
                "text": "Sollte es ein Tempolimit auf Autobahnen geben?",
                "options": [(AGREE, "GRÜNE"), (DISAGREE, "FDP"), (DISAGREE, "CDU")],
            },
            {
                "text": "Sollte die Rente mit 67 bleiben?",
                "options": [(AGREE, "FDP"), (DISAGREE, "LINKE"), (DISAGREE, "SPD")],
            },
            {
                "text": "Sollte Fleisch teurer werden (Fleischsteuer)?",
                "options": [(AGREE, "GRÜNE"), (DISAGREE, "AfD"), (DISAGREE, "CDU")],
            },
            {
                "text": "Sollte Marihuana legal bleiben?",
                "options": [(AGREE, "FDP"), (AGREE, "GRÜNE"), (DISAGREE, "CDU")],
            },
            {
                "text": "Sollte die Schuldenbremse gelockert werden?",
                "options": [(AGREE, "SPD"), (AGREE, "GRÜNE"), (DISAGREE, "FDP")],
            },
            {
                "text": "Sollte es mehr Videoüberwachung geben?",
                "options": [(AGREE, "CDU"), (AGREE, "AfD"), (DISAGREE, "LINKE")],
            },
            {
                "text": "Sollte Kohlekraft schneller abgeschaltet werden?",
                "options": [(AGREE, "GRÜNE"), (DISAGREE, "CDU"), (DISAGREE, "AfD")],
            },
            {
                "text": "Sollte das Bürgergeld erhöht werden?",
                "options": [(AGREE, "LINKE"), (AGREE, "SPD"), (DISAGREE, "CDU")],
            },
            {
                "text": "Sollte Deutschland mehr Fachkräfte aus dem Ausland holen?",
                "options": [(AGREE, "FDP"), (AGREE, "SPD"), (DISAGREE, "AfD")],
            },
        ],
    },
    {
        "title": "Wahlkompass: Allgemein",
        "description": "Allgemeine politische Orientierung.",
        "category": "general",
        "image_url": "https://images.unsplash.com/photo-1540910419892-f0c74b0e8966",
        "questions": [
            {
                "text": "Die Steuern für Reiche sollen erhöht werden.",
                "options": [(AGREE, "LINKE"), (AGREE, "SPD"), (DISAGREE, "FDP")],
            },
            {
                "text": "Atomkraft soll wieder genutzt werden.",
                "options": [(AGREE, "AfD"), (AGREE, "CDU"), (DISAGREE, "GRÜNE")],
            },
            {
                "text": "Der Mindestlohn soll auf 15 Euro steigen.",
                "options": [(AGREE, "SPD"), (AGREE, "LINKE"), (DISAGREE, "FDP")],
            },
            {
                "text": "Es soll eine PKW-Maut auf Autobahnen geben.",
                "options": [(AGREE, "CDU"), (DISAGREE, "GRÜNE"), (NEUTRAL, "SPD")],
            },
            {
                "text": "Kirchensteuern sollen abgeschafft werden.",
                "options": [(AGREE, "FDP"), (AGREE, "LINKE"), (DISAGREE, "CDU")],
            },
            {
                "text": "Es soll ein bedingungsloses Grundeinkommen geben.",
                "options": [(AGREE, "LINKE"), (NEUTRAL, "GRÜNE"), (DISAGREE, "CDU")],
            },
            {
                "text": "Die Bundeswehr soll im Inneren eingesetzt werden dürfen.",
                "options": [(AGREE, "AfD"), (AGREE, "CDU"), (DISAGREE, "LINKE")],
            },
            {
                "text": "Flugreisen sollen höher besteuert werden.",
                "options": [(AGREE, "GRÜNE"), (AGREE, "SPD"), (DISAGREE, "AfD")],
            },
            {
                "text": "Das Bargeld soll erhalten bleiben.",
                "options": [(AGREE, "AfD"), (AGREE, "FDP"), (NEUTRAL, "CDU")],
            },
            {
                "text": "Es soll eine allgemeine Dienstpflicht geben.",
                "options": [(AGREE, "CDU"), (AGREE, "AfD"), (DISAGREE, "FDP")],
            },
        ],
    },
    {
        "title": "Wahlkompass: Landtagswahl BW 2026",
        "description": "Der Wahlkompass für die Landtagswahl in Baden-Württemberg 2026 zu den wichtigsten Landesthemen.",
        "category": "landtag2026",
        "image_url": "https://www.planet-wissen.de/sendungen/sendung-parteien-kugelschreiber-100~_v-HDready.png",
        "questions": [
            {
                "text": "Die Pflicht zur Errichtung einer Solaranlage bei vollständigen Dachsanierungen soll entfallen.",
                "options": [
                    (AGREE, "AfD"),
                    (AGREE, "FDP"),
                    (DISAGREE, "GRÜNE"),
                    (DISAGREE, "SPD"),
                ],
            },
            {
                "text": "Die Betreuung in Kindertageseinrichtungen soll für alle Kinder beitragsfrei sein.",
                "options": [
                    (AGREE, "SPD"),
                    (AGREE, "LINKE"),
                    (DISAGREE, "CDU"),
                    (DISAGREE, "FDP"),
                ],
            },
            {
                "text": "Beim Ausbau der Verkehrsinfrastruktur soll die Schiene Vorrang vor der Straße haben.",
                "options": [
                    (AGREE, "GRÜNE"),
                    (AGREE, "SPD"),
                    (DISAGREE, "CDU"),
                    (DISAGREE, "FDP"),
                ],
            },
            {
                "text": "Mehr Krankenhäuser in Baden-Württemberg sollen in öffentlicher Hand sein.",
                "options": [(AGREE, "SPD"), (AGREE, "LINKE"), (DISAGREE, "FDP")],
            },
            {
                "text": "Die Videoüberwachung öffentlicher Plätze soll ausgeweitet werden.",
                "options": [(AGREE, "CDU"), (AGREE, "AfD"), (DISAGREE, "GRÜNE")],
            },
            {
                "text": "In großen Betrieben soll zur Kontrolle der Nutztierhaltung Videoüberwachung angeordnet werden können.",
                "options": [
                    (AGREE, "GRÜNE"),
                    (AGREE, "Tierschutzpartei"),
                    (DISAGREE, "FDP"),
                ],
            },
            {
                "text": "Baden-Württemberg soll am Ziel der Klimaneutralität festhalten.",
                "options": [(AGREE, "GRÜNE"), (AGREE, "SPD"), (DISAGREE, "AfD")],
            },
        ],
    },
]

POLLS = [
    {
        "question": "Wie zufrieden bist du aktuell mit der Bundesregierung?",
        "options": ["Sehr zufrieden", "Zufrieden", "Eher unzufrieden", "Sehr unzufrieden"],
    },
    {
        "question": "Ist es berechtigt, dass die AfD als rechtsextrem eingestuft wird?",
        "options": ["Ja, absolut", "Eher ja", "Eher nein", "Nein, gar nicht", "Keine Meinung"],
    },
    {
        "question": "Sollte ein Verbotsverfahren gegen die AfD eingeleitet werden?",
        "options": ["Ja", "Nein", "Unentschlossen"],
    },
    {
        "question": "Wie stehst Du zur Wiedereinführung der Wehrpflicht?",
        "options": ["Dafür", "Dagegen", "Nur als freiwilliges Jahr"],
    },
    {
        "question": "Sollten die Rentenbeiträge stabil bleiben, auch wenn das Rentenalter steigen muss?",
        "options": ["Ja", "Nein", "Lieber höhere Beiträge"],
    },
    {
        "question": "Sollte Deutschland die Ukraine weiterhin militärisch unterstützen?",
        "options": ["Ja, uneingeschränkt", "Ja, aber weniger", "Nein, gar nicht"],
    },
    {
        "question": "Wie wichtig ist dir Klimaschutz im Alltag?",
        "options": ["Sehr wichtig", "Wichtig", "Weniger wichtig", "Gar nicht wichtig"],
    },
    {
        "question": "Sollte das Gendern in öffentlichen Behörden verboten werden?",
        "options": ["Ja", "Nein", "Egal"],
    },
    {
        "question": "Wie wahrscheinlich ist es, dass du an der nächsten Wahl teilnimmst?",
        "options": [
            "Sehr wahrscheinlich",
            "Wahrscheinlich",
            "Eher unwahrscheinlich",
            "Sicher nicht",
        ],
    },
]

ARTICLES = [
    {
        "title": "Vorstoß der SPD: TikTok und Instagram erst ab 14 Jahren",
        "summary": "Die SPD fordert strengere Altersgrenzen für soziale Medien, um Kinder und Jugendliche besser vor schädlichen Inhalten zu schützen.",
        "content": "Ein neuer Vorstoß der SPD-Bundestagsfraktion sorgt für Diskussionen: Die Partei fordert, dass Plattformen wie TikTok und Instagram erst ab einem Alter von 14 Jahren genutzt werden dürfen. Ziel ist es, die psychische Gesundheit junger Menschen zu schützen und Cybermobbing sowie die Verbreitung von Fake News einzudämmen.",
        "type": "news",
        "source": "MSN / SPD",
        "source_url": "https://www.msn.com/de-de/nachrichten/other/vorsto%C3%9F-der-spd-tiktok-und-instagram-erst-von-14-jahren-an/ar-AA1WsSpu",
        "image_url": "https://img-s-msn-com.akamaized.net/tenant/amp/entityid/AA1WsSpu.img",
    },
    {
        "title": "Prozess gegen Deutschland: Harald Martensteins Plädoyer gegen ein AfD-Verbot",
        "summary": "Kolumnist Harald Martenstein warnt vor den Folgen eines Verbotsverfahrens und plädiert für die politische Auseinandersetzung.",
        "content": "In seinem ausführlichen Plädoyer setzt sich Harald Martenstein kritisch mit der Forderung nach einem AfD-Verbot auseinander. Er argumentiert, dass ein solches Verfahren die Polarisierung in der Gesellschaft weiter verschärfen könnte und die demokratische Auseinandersetzung nicht ersetzen kann.",
        "type": "news",
        "source": "MSN / WELT",
        "source_url": "https://www.msn.com/de-de/nachrichten/politik/prozess-gegen-deutschland-harald-martensteins-pl%C3%A4doyer-gegen-ein-afd-verbot-im-wortlaut/ar-AA1WrGvF",
        "image_url": "https://img-s-msn-com.akamaized.net/tenant/amp/entityid/AA1WrGvF.img",
    },
    {
        "title": "Baden-Württemberg: Was eine neue Regierung in Stuttgart erwartet",
        "summary": "Herausforderungen für die nächste Landesregierung: Wirtschaft, Bildung und Infrastruktur stehen im Fokus.",
        "content": "Vor der kommenden Landtagswahl in Baden-Württemberg rücken die großen Herausforderungen für Stuttgart in den Mittelpunkt. Eine neue Regierung wird sich mit der Transformation der Automobilindustrie, dem Lehrermangel und dem maroden Zustand vieler Landesstraßen auseinandersetzen müssen.",
        "type": "news",
        "source": "MSN / Finanzen",
        "source_url": "https://www.msn.com/de-de/finanzen/top-stories/baden-w%C3%BCrttemberg-was-eine-neue-regierung-in-stuttgart-erwartet/ar-AA1WsnaR",
        "image_url": "https://img-s-msn-com.akamaized.net/tenant/amp/entityid/AA1WsnaR.img",
    },
]
