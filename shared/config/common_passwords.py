"""
Built-in common passwords list.

Used when the external list cannot be loaded (disabled, unreachable, or
malformed). Entries are already normalized: trimmed, lowercase, unique,
ordered roughly from most to least common.
"""

COMMON_PASSWORDS_FALLBACK: tuple[str, ...] = (
    "123456", "password", "123456789", "12345678", "12345", "qwerty", "111111",
    "abc123", "password1", "1234567", "1234567890", "letmein", "welcome", "admin",
    "password1!", "123123", "000000", "iloveyou", "1234", "1q2w3e4r5t", "qwertyuiop",
    "123", "monkey", "dragon", "123456a", "654321", "123321", "666666", "1qaz2wsx",
    "myspace1", "121212", "homelesspa", "123qwe", "a123456", "123abc", "1q2w3e4r",
    "qwe123", "7777777", "qwerty123", "target123", "tinkle", "987654321", "qwerty1",
    "222222", "zxcvbnm", "1g2w3e4r", "gwerty", "zag12wsx", "gwerty123", "555555",
    "fuckyou", "112233", "asdfghjkl", "1q2w3e", "123123123", "qazwsx", "computer",
    "princess", "12345a", "ashley", "159753", "michael", "football", "sunshine",
    "1234qwer", "iloveyou1", "aaaaaa", "fuckyou1", "789456123", "daniel", "777777",
    "princess1", "123654", "11111", "asdfgh", "999999", "11111111", "passer2009",
    "888888", "love", "abcd1234", "shadow", "football1", "love123", "superman",
    "jordan23", "jessica", "monkey1", "12qwaszx", "a12345", "baseball", "123456789a",
    "killer", "asdf", "samsung", "master", "azerty", "charlie", "asd123", "soccer",
    "fqrg7cs493", "88888888", "jordan", "michael1", "jesus1", "linkedin", "babygirl1",
    "789456", "thomas", "harley", "trustno1", "hunter", "hunter2", "buster", "batman",
    "robert", "hockey", "ranger", "andrew", "george", "pepper", "jennifer", "joshua",
    "cheese", "amanda", "summer", "freedom", "ginger", "nicole", "chelsea", "biteme",
    "matthew", "access", "yankees", "dallas", "austin", "thunder", "taylor", "matrix",
    "william", "corvette", "hello", "martin", "heather", "secret", "merlin", "diamond",
    "1234qwerty", "hammer", "silver", "anthony", "justin", "test", "bailey",
    "q1w2e3r4t5", "patrick", "internet", "scooter", "orange", "golfer", "cookie",
    "richard", "samantha", "bigdog", "guitar", "jackson", "whatever", "mickey",
    "chicken", "sparky", "snoopy", "maverick", "phoenix", "camaro", "peanut", "morgan",
    "welcome1", "falcon", "cowboy", "ferrari", "samsung1", "andrea", "smokey",
    "steelers", "joseph", "mercedes", "dakota", "arsenal", "eagles", "melissa",
    "boomer", "booboo", "spider", "nascar", "monster", "tigers", "yellow", "xxxxxx",
    "123123a", "gateway", "marina", "diablo", "bulldog", "qwer1234", "compaq", "purple",
    "hardcore", "banana", "junior", "hannah", "123654789", "porsche", "lakers",
    "iceman", "money", "cowboys", "987654", "london", "tennis", "999999999", "ncc1701",
    "coffee", "scooby", "miller", "boston", "q1w2e3r4", "brandon", "yamaha", "chester",
    "mustang1", "mustang", "fuckme", "1111", "pussy", "apple", "qazwsxedc", "passw0rd",
    "p@ssw0rd", "p@ssword", "pa$$word", "password12", "password123", "password1234",
    "password01", "password!", "password2", "password3", "admin123", "admin1",
    "administrator", "root", "toor", "changeme", "default", "guest", "user", "login",
    "letmein1", "letmein123", "welcome123", "welcome!", "qwerty12", "qwerty1234",
    "qwerty!", "qwertyui", "asdfasdf", "asdf1234", "zxcvbn", "zxcvbnm1", "1qazxsw2",
    "zaq1zaq1", "zaq12wsx", "!qaz2wsx", "1qaz@wsx", "abcdef", "abcdefg", "abcdefgh",
    "abc12345", "abcabc", "aaaaaaaa", "a1b2c3", "a1b2c3d4", "qweasd", "qweasdzxc",
    "asdzxc", "123asd", "123qweasd", "1234abcd", "12341234", "11223344", "121212a",
    "123321a", "1111111", "000000000", "00000000", "0000", "10203", "102030",
    "123456789q", "987654321a", "147258369", "147258", "159357", "159951", "741852963",
    "963852741", "753951", "852456", "456789", "456123", "321654", "135790", "246810",
    "13579", "24680", "12344321", "1234554321", "98765", "1212", "2000", "2020", "2021",
    "2022", "2023", "2024", "1990", "1991", "1992", "1993", "1994", "1995", "1996",
    "1997", "1998", "1999", "1985", "1986", "1987", "1988", "1989", "summer2020",
    "summer2021", "summer2022", "summer2023", "spring2023", "winter2023", "autumn2023",
    "fall2023", "january", "february", "march", "april", "june", "july", "august",
    "september", "october", "november", "december", "monday", "friday", "sunday",
    "secret1", "secret123", "starwars", "starwars1", "pokemon", "pokemon1", "minecraft",
    "minecraft1", "fortnite", "roblox", "naruto", "goku", "batman1", "superman1",
    "spiderman", "ironman", "avengers", "marvel", "hellokitty", "snowball", "flower",
    "flowers", "butterfly", "sunflower", "rainbow", "angel", "angel1", "angels",
    "lovely", "loveme", "lovers", "lover", "iloveu", "iloveyou2", "ilovemyself",
    "imissyou", "forever", "together", "friends", "friend", "bestfriend", "family",
    "mother", "father", "mommy", "daddy", "baby", "babygirl", "babyboy", "sweety",
    "sweetie", "sweetheart", "honey", "darling", "beautiful", "pretty", "cutie",
    "princesa", "tequiero", "teamo", "jesus", "jesuschrist", "christ", "blessed",
    "faith", "heaven", "god", "godislove", "michelle", "jasmine", "ashley1", "jessica1",
    "amanda1", "nicole1", "daniel1", "robert1", "thomas1", "charlie1", "jordan1",
    "justin1", "anthony1", "joshua1", "matthew1", "andrew1", "william1", "david",
    "david1", "james", "james1", "john", "john1", "johnny", "chris", "chris1",
    "christian", "alexander", "alex", "alex1", "maria", "mario", "carlos", "sophie",
    "olivia", "emma", "lucas", "oliver", "victoria", "elizabeth", "stephanie",
    "natalie", "brittany", "chocolate", "cheese1", "pizza", "pizza1", "cookies",
    "candy", "sugar", "whiskey", "beer", "vodka", "coffee1", "banana1", "apple1",
    "orange1", "lemon", "cherry", "strawberry", "peaches", "pumpkin", "tiger", "tiger1",
    "lion", "eagle", "eagle1", "wolf", "fox", "bear", "panda", "panther", "shark",
    "dolphin", "horse", "rabbit", "kitten", "kitty", "puppy", "doggie", "doggy", "dog",
    "cat", "fish", "bird", "soccer1", "baseball1", "basketball", "hockey1", "golf",
    "tennis1", "rugby", "boxing", "racing", "yankees1", "lakers1", "cowboys1",
    "steelers1", "packers", "redsox", "chelsea1", "liverpool", "barcelona",
    "realmadrid", "manchester", "juventus", "ronaldo", "messi", "beckham", "kobe24",
    "michaeljordan", "music", "music1", "guitar1", "piano", "rocknroll", "metallica",
    "nirvana", "eminem", "blink182", "slipknot", "rockstar", "superstar", "star",
    "stars", "moon", "sun", "sky", "ocean", "river", "mountain", "forest", "nature",
    "earth", "fire", "water", "ice", "snow", "storm", "lightning", "thunder1",
    "shadow1", "ghost", "demon", "devil", "angel123", "killer1", "hunter1", "ninja",
    "samurai", "warrior", "soldier", "knight", "king", "queen", "prince", "princess123",
    "master1", "master123", "boss", "leader", "hero", "legend", "genius", "smart",
    "crazy", "happy", "happy1", "smile", "funny", "sexy", "sexy1", "hottie", "cool",
    "cool123", "awesome", "amazing", "perfect", "freedom1", "liberty", "america", "usa",
    "canada", "mexico", "brazil", "france", "germany", "italy", "spain", "china",
    "japan", "korea", "india", "russia", "london1", "paris", "berlin", "tokyo",
    "newyork", "chicago", "boston1", "dallas1", "texas", "florida", "california",
    "computer1", "internet1", "laptop", "windows", "linux", "apple123", "google",
    "google123", "facebook", "twitter", "instagram", "youtube", "yahoo", "hotmail",
    "gmail", "email", "mypassword", "mypass", "passpass", "pass", "pass123", "pass1234",
    "password321", "pas$word", "passwort", "motdepasse", "contrasena", "senha",
    "parola", "haslo", "salasana", "wachtwoord", "qwertz", "azertyuiop", "qwertyu",
    "qweqwe", "asdasd", "zxczxc", "qaz123", "wsx123", "edc123", "1qaz", "2wsx", "3edc",
    "!@#$%^", "!@#$%^&*", "!@#$%", "1q2w3e4r!", "1qaz2wsx!", "qwerty123!",
    "password123!", "welcome1!", "admin123!", "abc123!", "letmein!", "iloveyou!",
    "monkey123", "dragon1", "dragon123", "shadow123", "sunshine1", "sunshine123",
    "football123", "baseball123", "princess12", "superman123", "batman123",
    "charlie123", "michael123", "jordan123", "hello123", "hello1", "hello!",
    "helloworld", "trustme", "trustno1!", "whatever1", "nothing", "something",
    "anything", "everything", "test123", "test1", "testing", "testing123", "temp",
    "temp123", "demo", "sample", "example", "student", "teacher", "school", "college",
    "university", "office", "work", "business", "company", "manager", "support",
    "service", "security", "system", "server", "network", "database", "oracle", "mysql",
    "postgres", "sa", "sysadmin", "webmaster", "operator", "backup", "public",
    "private", "secure", "access1", "access14", "letmeinnow", "openup", "opensesame",
    "magic", "wizard", "merlin1", "gandalf", "dragonball", "pikachu", "zelda", "mario1",
    "sonic", "pacman", "tetris", "gamer", "gaming", "player", "player1", "xbox",
    "playstation", "nintendo", "callofduty", "warcraft", "counterstrike", "monkey12",
    "monkey1234", "monkey!", "monkey01", "monkey2020", "monkey69", "monkey007",
    "monkey99", "dragon12", "dragon1234", "dragon!", "dragon01", "dragon2020",
    "dragon69", "dragon007", "dragon99", "shadow12", "shadow1234", "shadow!",
    "shadow01", "shadow2020", "shadow69", "shadow007", "shadow99", "master12",
    "master1234", "master!", "master01", "master2020", "master69", "master007",
    "master99", "michael12", "michael1234", "michael!", "michael01", "michael2020",
    "michael69", "michael007", "michael99", "jennifer1", "jennifer12", "jennifer123",
    "jennifer1234", "jennifer!", "jennifer01", "jennifer2020", "jennifer69",
    "jennifer007", "jennifer99", "hunter12", "hunter123", "hunter1234", "hunter!",
    "hunter01", "hunter2020", "hunter69", "hunter007", "hunter99", "ranger1",
    "ranger12", "ranger123", "ranger1234", "ranger!", "ranger01", "ranger2020",
    "ranger69", "ranger007", "ranger99", "buster1", "buster12", "buster123",
    "buster1234", "buster!", "buster01", "buster2020", "buster69", "buster007",
    "buster99", "soccer12", "soccer123", "soccer1234", "soccer!", "soccer01",
    "soccer2020", "soccer69", "soccer007", "soccer99", "hockey12", "hockey123",
    "hockey1234", "hockey!", "hockey01", "hockey2020", "hockey69", "hockey007",
    "hockey99", "killer12", "killer123", "killer1234", "killer!", "killer01",
    "killer2020", "killer69", "killer007", "killer99", "george1", "george12",
    "george123", "george1234", "george!", "george01", "george2020", "george69",
    "george007", "george99", "charlie12", "charlie1234", "charlie!", "charlie01",
    "charlie2020", "charlie69", "charlie007", "charlie99", "andrew12", "andrew123",
    "andrew1234", "andrew!", "andrew01", "andrew2020", "andrew69", "andrew007",
    "andrew99", "thomas12", "thomas123", "thomas1234", "thomas!", "thomas01",
    "thomas2020", "thomas69", "thomas007", "thomas99", "jordan12", "jordan1234",
    "jordan!", "jordan01", "jordan2020", "jordan69", "jordan007", "jordan99", "harley1",
    "harley12", "harley123", "harley1234", "harley!", "harley01", "harley2020",
    "harley69", "harley007", "harley99", "ginger1", "ginger12", "ginger123",
    "ginger1234", "ginger!", "ginger01", "ginger2020", "ginger69", "ginger007",
    "ginger99", "pepper1", "pepper12", "pepper123", "pepper1234", "pepper!", "pepper01",
    "pepper2020", "pepper69", "pepper007", "pepper99", "summer1", "summer12",
    "summer123", "summer1234", "summer!", "summer01", "summer69", "summer007",
    "summer99", "freedom12", "freedom123", "freedom1234", "freedom!", "freedom01",
    "freedom2020", "freedom69", "freedom007", "freedom99", "matrix1", "matrix12",
    "matrix123", "matrix1234", "matrix!", "matrix01", "matrix2020", "matrix69",
    "matrix007", "matrix99", "silver1", "silver12", "silver123", "silver1234",
    "silver!", "silver01", "silver2020", "silver69", "silver007", "silver99",
    "diamond1", "diamond12", "diamond123",
)
