# fuadmita

A small visual novel about Fuad and Mita, drawn with pygame in a 1000×550
window titled "Fuad dan Mita".

The window opens on a main menu. The menu shows a background picture, a line of
text and a button labelled "Pencet aku". Clicking the button fades to black and
then fades into the game page. The game page plays the story scenes. The first
scene, in Fuad's room, has one line from Fuad. Press Enter after it and the game
moves to a restaurant scene, where Mita and Fuad greet each other. A dialog line
slides the speaker's picture in and types out the message. Press Enter to go on
to the next line. A frame counter is drawn in red in the top-left corner.

## Installing

```
pip install .
```

This installs `pygame`, which draws the window and plays the audio.

## Running

```
fuadmita
fuadmita --assets /path/to/assets
```

The program loads its fonts, images and music from an asset directory. It uses
the first of these that applies:

1. the `--assets` option;
2. the `FUADMITA_ASSETS` environment variable;
3. the directory of the running program (`fuadmita.assets.default_asset_dir()`).

The asset directory must hold these files:

- fonts: `Roboto-Regular.ttf`, `Roboto-SemiBold.ttf`
- images: `Futon_Room.png`, `Restaurant_A.png`, `emoji.png`, `emoji2.png`,
  `fuad.png`, `mita.png`, `nametag.png`, `arrow_dialog.png`
- music: `Morning.mp3`

A missing font or button image raises `FileNotFoundError`. So does missing
music. A missing background or page image is logged and drawn as empty. A
missing sound effect is logged and skipped.

## How it is put together

- `fuadmita.app.main(argv=None)` is the `fuadmita` command. It builds an
  `Engine` and opens the window on a `MainMenuPage`.
- `fuadmita.engine.Engine` owns the output surface and the page manager.
  - `Engine.step(inputs)` advances one frame for an `InputState` and returns the
    composed picture.
  - `Engine.run(first_page)` opens the window and loops until it is closed.
- `fuadmita.page_manager.PageManager` shows one `fuadmita.page.Page` at a time.
  `go_to(page)` fades the old page to black and then fades the new one in. Each
  fade takes 40 frames.
- `fuadmita.ui.UI` keeps text, button, rectangle and image elements. It redraws
  them onto a `fuadmita.canvas.Canvas` only when something has changed. It also
  fires button callbacks on a mouse press and switches between the arrow and
  hand cursors.
- `fuadmita.scene_manager.SceneManager` runs the `fuadmita.scene.Scene` objects
  inside the game page. It handles:
  - the background;
  - the dialog queue (`add_dialog`, `add_question`);
  - music and sound effects, through `AudioPlayer`;
  - fades between scenes.
- The content lives in these classes:
  - `fuadmita.main_menu.MainMenuPage`
  - `fuadmita.about_page.AboutPage`
  - `fuadmita.game_page.GamePage`
  - `fuadmita.scene_1.Scene1`
  - `fuadmita.scene_2.Scene2`

## What it does not do

- No asset files are included. You must supply them yourself.
- The story is two short scenes and has no ending or save/load.
- `SceneManager.add_question` queues a question with four answers, but only its
  message is shown. The answers are neither displayed nor selectable. Enter
  moves past a question like any other line.
- `AboutPage` exists, and `MainMenuPage.open_about()` switches to it, but no
  menu button leads there.

## Tests

```
pip install .[test]
pytest
```