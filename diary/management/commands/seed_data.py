user_fixtures = [
    {"username": "johndoe", "email": "john.doe@example.org", "first_name": "John", "last_name": "Doe"},
    {"username": "janedoe", "email": "jane.doe@example.org", "first_name": "Jane", "last_name": "Doe"},
    {"username": "charlie", "email": "charlie.johnson@example.org", "first_name": "Charlie", "last_name": "Johnson"},
]

# Sightings per default category name.
sightings = {
    "Mammals": ["Red fox at dusk", "Squirrel raiding the feeder", "Deer by the river", "Hedgehog on the lawn"],
    "Birds": ["Kingfisher on the weir", "Heron fishing", "Swallows over the meadow", "Woodpecker drumming"],
    "Fish": ["Carp in the pond", "Trout rising", "Minnows in the shallows"],
    "Insects": ["Swallowtail butterfly", "Dragonfly patrol", "Fireflies after rain", "Stag beetle"],
    "Amphibians": ["Frog spawn", "Newt under a log", "Tree frog chorus"],
    "Reptiles": ["Grass snake basking", "Lizard on the wall", "Turtle on a rock"],
    "Plants": ["Cherry blossom", "Wild orchid", "First bluebells", "Moss garden"],
    "Fungi": ["Fly agaric", "Bracket fungus", "Puffballs in the wood"],
    "Other": ["Spider web with dew", "Animal tracks in snow", "Strange nest"],
}

comment_phrases = [
    "Beautiful find!",
    "Where exactly was this?",
    "I saw one there last week too.",
    "Great photo.",
    "How close did you get?",
    "Lovely colours.",
]

album_names = ["Favourites", "Birds to find", "Spring walks", "Night sightings", "To revisit"]

# Rough bounding box for generated locations (lat_min, lat_max, lng_min, lng_max).
LOCATION_BOX = (33.0, 43.0, 130.0, 142.0)
