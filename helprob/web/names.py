# helprob/web/names.py
# Statische data voor de decoy-pagina.

SERVERS = [
    "Apache/2.4.41 (Unix)",
    "nginx/1.18.0",
    "Microsoft-IIS/10.0",
    "LiteSpeed",
    "Apache Tomcat/9.0.37",
    "Jetty(9.4.28)",
    "Express",
    "Caddy",
    "Cherokee/1.2.104",
    "Kestrel",
    "gunicorn/20.0.4",
    "CherryPy/18.6.0",
    "Puma 4.3.5 (ruby 2.7.1-p158)",
    "Unicorn 5.6.2",
    "TornadoServer/6.0.4",
    "WildFly/21",
    "GlassFish Server Open Source Edition 5.0",
    "Oracle-Application-Server-11g",
    "Zope/(2.13.29, python 2.7.18, linux2) ZServer/1.1",
    "Resin/4.0.48",
]

NAMES = [
    "Jacob", "Mason", "William", "Jayden", "Noah", "Michael", "Ethan", "Alexander",
    "Aiden", "Daniel", "Anthony", "Matthew", "Elijah", "Joshua", "Liam", "Andrew",
    "James", "David", "Benjamin", "Christopher", "Logan", "Joseph", "Jackson", "Gabriel",
    "Ryan", "Samuel", "John", "Nathan", "Lucas", "Christian", "Jonathan", "Caleb",
    "Dylan", "Landon", "Isaac", "Brayden", "Gavin", "Tyler", "Carter", "Julian",
    "Henry", "Jose", "Blake", "Adam", "Juan", "Bryson", "Kayden", "Asher",
    "Colin", "Jake", "Preston", "Marcus", "Braxton", "Kaiden", "Maddox", "Andres",
    "Eduardo", "Omar", "Avery", "Fernando", "Trenton", "Landen", "Braylon", "Bennett",
    "Lukas", "Clayton", "Zander", "Paxton", "Jasper", "Aden", "Reid", "Elliott",
    "Corey", "Jax", "Leland", "Cohen", "Brooks", "Tristen", "Romeo", "Dustin",
    "Donald", "Matteo", "Tate", "Jalen", "Tony", "Walker", "Issac", "Knox",
    "Chandler", "Bryant", "Ronan", "Atticus", "Pierce", "Muhammad", "Jonas", "Malcolm",
    "Byron", "Justice", "Nash", "Quinton", "Brodie", "Braiden", "Rodney", "Jase",
    "Blaine", "Aldo", "Jamarion", "Jaydon", "Kendall", "Mohammad", "Melvin", "Layton",
    "Triston", "Sincere", "Rene", "Neil", "Kayson", "Tripp", "Ray", "Aryan",
    "Jessie", "Kolby", "Dwayne", "Tristin", "Brendon", "Winston", "Cedric", "Vincenzo",
    "Edison", "Davian", "Emmitt", "Giancarlo", "Duncan", "Xavi", "Izayah", "Keenan",
    "Cale", "Marcel", "Jair", "Irvin", "Masen", "Cassius", "Isai", "Fletcher",
    "Santos", "Zaire", "Coleman", "Jabari", "Legend", "Benton", "Hugh", "Devan",
]
